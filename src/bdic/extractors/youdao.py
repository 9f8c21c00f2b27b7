# src/bdic/extractors/youdao.py
from __future__ import annotations

import logging
import re
from typing import Any, Dict

from bs4 import BeautifulSoup
from bs4.element import Tag

from bdic.extractors.base import BaseExtractor, ShapeTag, put
from bdic.extractors.text import normalize, plain_text, select_text

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"\d+")
_VIA = ".example-via"


class YoudaoExtractor(BaseExtractor):
    """
    dict.youdao.com pages. Either a typo page ("did not find ...") or a
    definition page; the definition page has no sub-shapes, missing sections
    simply leave their fields unset.
    """

    name = "youdao"

    def classify(self, soup: BeautifulSoup) -> ShapeTag:
        if soup.select_one(".error-typo") is not None:
            return ShapeTag.TYPO
        return ShapeTag.FULL_DEFINITION

    def extract_fields(self, soup: BeautifulSoup, shape: ShapeTag) -> Dict[str, Any]:
        if shape is ShapeTag.TYPO:
            return extract_typo(soup)
        if shape is ShapeTag.FULL_DEFINITION:
            return extract_definition(soup)
        return {}


def extract_typo(soup: BeautifulSoup) -> Dict[str, Any]:
    record: Dict[str, Any] = {}
    put(record, "list", select_text(soup, ".error-typo"))
    return record


def parse_stars(soup: BeautifulSoup) -> int:
    """First run of digits in the class attribute of `.star`, e.g. "star star4" -> 4."""
    star = soup.select_one(".star")
    if star is None:
        return 0
    classes = star.get("class") or []
    if isinstance(classes, str):
        classes = [classes]
    match = _DIGITS.search(" ".join(classes))
    return int(match.group()) if match else 0


def sentence_line(item: Tag) -> str:
    """Sentence text with its citation appended, e.g. "Hello there.   (Collins)"."""
    via = normalize(select_text(item, _VIA))
    paragraphs = (p for p in item.select("p") if not _within_via(p, item))
    text = normalize("".join(plain_text(p, exclude=_VIA) for p in paragraphs))
    if not text:
        return ""
    if via:
        return f"{text}   ({via})"
    return text


def _within_via(el: Tag, root: Tag) -> bool:
    while el is not None and el is not root:
        if "example-via" in (el.get("class") or []):
            return True
        el = el.parent
    return False


def extract_definition(soup: BeautifulSoup) -> Dict[str, Any]:
    record: Dict[str, Any] = {}
    put(record, "title", select_text(soup, ".keyword"))
    put(record, "stars", parse_stars(soup))
    put(record, "rank", select_text(soup, ".rank"))
    put(record, "pattern", select_text(soup, ".pattern"))

    prons = (normalize(plain_text(el)) for el in soup.select(".baav .pronounce"))
    put(record, "prons", " ".join(p for p in prons if p))

    basic = (normalize(plain_text(el)) for el in soup.select("#phrsListTab .trans-container li"))
    put(record, "basic", [b for b in basic if b])

    put(record, "discrimination", select_text(soup, "#discriminate"))

    lines = (sentence_line(item) for item in soup.select("#authority .ol li"))
    put(record, "sentence", [line for line in lines if line])

    put(record, "translation", select_text(soup, "#fanyiToggle .trans-container"))
    return record
