# src/bdic/extractors/base.py
from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, NamedTuple, Optional, Tuple
from urllib.parse import quote

from bs4 import BeautifulSoup

from bdic.errors import LookupFailed, describe_error
from bdic.extractors.text import normalize
from bdic.fetchers.http import HttpFetcher

logger = logging.getLogger(__name__)

# Same characters JavaScript's encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


class ShapeTag(enum.Enum):
    """Page layouts an upstream response can take."""

    FULL_DEFINITION = "full_definition"
    MACHINE_TRANSLATION = "machine_translation"
    SUGGESTIONS = "suggestions"
    TYPO = "typo"
    NO_MATCH = "no_match"
    UNKNOWN = "unknown"


class Definition(NamedTuple):
    pos: str
    definition: str


class Sentence(NamedTuple):
    en: str
    chs: str
    source: str


class Meaning(NamedTuple):
    word: str
    definition: str


class Suggestion(NamedTuple):
    title: str
    meanings: Tuple[Meaning, ...]


@dataclass(frozen=True)
class DictionaryRecord:
    """
    Normalized result of one lookup.
    Only `title` makes a record a hit; every other field is set only when the
    page had something non-empty for it.
    """
    title: Optional[str] = None
    phsym: Optional[str] = None
    prons: Optional[str] = None
    rank: Optional[str] = None
    stars: int = 0
    infs: Optional[str] = None
    pattern: Optional[str] = None
    cdef: Optional[Tuple[Definition, ...]] = None
    basic: Optional[Tuple[str, ...]] = None
    sentences: Optional[Tuple[Sentence, ...]] = None
    sentence: Optional[Tuple[str, ...]] = None
    discrimination: Optional[str] = None
    translation: Optional[str] = None
    defs: Optional[Tuple[Suggestion, ...]] = None
    list: Optional[str] = None

    @property
    def hit(self) -> bool:
        return bool(self.title)

    def to_dict(self) -> Dict[str, Any]:
        """Populated fields only (stars kept when non-zero)."""
        out = asdict(self)
        return {k: v for k, v in out.items() if v}


RECORD_FIELDS = frozenset(f.name for f in fields(DictionaryRecord))


def put(record: Dict[str, Any], name: str, value: Any) -> None:
    """
    Store `value` under `name` unless it is empty.
    Strings are normalized first; sequences are kept as tuples.
    """
    if name not in RECORD_FIELDS:
        raise KeyError(f"Unknown record field: {name}")
    if isinstance(value, str):
        value = normalize(value)
    elif isinstance(value, (list, tuple)):
        value = tuple(value)
    if value:
        record[name] = value
    else:
        record.pop(name, None)


def build_query_url(base_url: str, word: str) -> str:
    """Collapse whitespace runs in `word` and percent-encode it onto `base_url`."""
    word = " ".join(word.split())
    return base_url + quote(word, safe=_URI_COMPONENT_SAFE)


class BaseExtractor(ABC):
    """
    Contract for all dictionary sources:
    input: a word (lookup) or the raw markup of a response (parse)
    output: DictionaryRecord
    """

    name: str = ""

    def __init__(self, fetcher: HttpFetcher, base_url: str) -> None:
        self._fetcher = fetcher
        self._base_url = base_url

    @abstractmethod
    def classify(self, soup: BeautifulSoup) -> ShapeTag:
        raise NotImplementedError

    @abstractmethod
    def extract_fields(self, soup: BeautifulSoup, shape: ShapeTag) -> Dict[str, Any]:
        raise NotImplementedError

    def parse(self, markup: str) -> DictionaryRecord:
        soup = BeautifulSoup(markup, "lxml")
        shape = self.classify(soup)
        logger.debug("%s response classified as %s", self.name, shape.value)

        found = self.extract_fields(soup, shape)
        logger.info("Extracted %s record: fields=%s", self.name, sorted(found))
        return DictionaryRecord(**found)

    async def lookup(self, word: str) -> DictionaryRecord:
        url = build_query_url(self._base_url, word)
        resp = await self._fetcher.fetch_text(url)

        if not resp.ok:
            message = describe_error(resp.text, resp.reason)
            logger.info("%s returned %s for %s.", self.name, resp.status, url)
            raise LookupFailed(message, status=resp.status, url=resp.url)

        return self.parse(resp.text)
