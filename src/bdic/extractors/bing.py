# src/bdic/extractors/bing.py
from __future__ import annotations

import logging
from typing import Any, Dict

from bs4 import BeautifulSoup

from bdic.extractors.base import (
    BaseExtractor,
    Definition,
    Meaning,
    Sentence,
    ShapeTag,
    Suggestion,
    put,
)
from bdic.extractors.text import normalize, plain_text, select_text

logger = logging.getLogger(__name__)

MAX_SENTENCES = 4

# Checked in this order; the first marker present wins.
SHAPE_MARKERS = (
    (ShapeTag.FULL_DEFINITION, ".client_def_hd_hd"),
    (ShapeTag.MACHINE_TRANSLATION, ".client_trans_head"),
    (ShapeTag.SUGGESTIONS, ".client_do_you_mean_title_bar"),
)


class BingExtractor(BaseExtractor):
    """
    cn.bing.com client dictionary pages. Three shapes:
    - full definition (headword, phonetics, definitions, inflections, sentences)
    - machine translation (no dictionary entry for the input)
    - "do you mean" suggestions
    """

    name = "bing"

    def classify(self, soup: BeautifulSoup) -> ShapeTag:
        for shape, marker in SHAPE_MARKERS:
            if soup.select_one(marker) is not None:
                return shape
        return ShapeTag.UNKNOWN

    def extract_fields(self, soup: BeautifulSoup, shape: ShapeTag) -> Dict[str, Any]:
        if shape is ShapeTag.FULL_DEFINITION:
            return extract_definition(soup)
        if shape is ShapeTag.MACHINE_TRANSLATION:
            return extract_translation(soup)
        if shape is ShapeTag.SUGGESTIONS:
            return extract_suggestions(soup)
        return {}


def extract_definition(soup: BeautifulSoup) -> Dict[str, Any]:
    record: Dict[str, Any] = {}
    put(record, "title", select_text(soup, ".client_def_hd_hd"))

    phsyms = (normalize(select_text(el, ".client_def_hd_pn")) for el in soup.select(".client_def_hd_pn_list"))
    put(record, "phsym", "".join(p for p in phsyms if p))

    cdef = []
    for bar in soup.select(".client_def_container .client_def_bar"):
        # word tags are cross references, not definitions
        if bar.select_one(".client_def_list_word_Tag") is not None:
            continue
        pos = normalize(select_text(bar, ".client_def_title_bar"))
        definition = normalize(select_text(bar, ".client_def_list"))
        if pos and definition:
            cdef.append(Definition(pos, definition))
    put(record, "cdef", cdef)

    infs = (normalize(plain_text(el)) for el in soup.select(".client_word_change_word"))
    put(record, "infs", ", ".join(i for i in infs if i))

    sentences = (
        Sentence(
            en=normalize(select_text(item, ".client_sen_en")),
            chs=normalize(select_text(item, ".client_sen_cn")),
            source=normalize(select_text(item, ".client_sentence_list_link")),
        )
        for item in soup.select(".client_sentence_list")[:MAX_SENTENCES]
    )
    put(record, "sentences", [s for s in sentences if any(s)])
    return record


def extract_translation(soup: BeautifulSoup) -> Dict[str, Any]:
    record: Dict[str, Any] = {}
    put(record, "translation", select_text(soup, ".client_sen_cn"))
    return record


def extract_suggestions(soup: BeautifulSoup) -> Dict[str, Any]:
    record: Dict[str, Any] = {}
    put(record, "title", select_text(soup, ".client_do_you_mean_title_bar"))

    groups = []
    for area in soup.select(".client_do_you_mean_area"):
        items = area.select(".client_do_you_mean_list")
        if not items:
            continue
        rows = (
            Meaning(
                word=normalize(select_text(item, ".client_do_you_mean_list_word")),
                definition=normalize(select_text(item, ".client_do_you_mean_list_def")),
            )
            for item in items
        )
        meanings = tuple(m for m in rows if any(m))
        if not meanings:
            continue
        groups.append(Suggestion(normalize(select_text(area, ".client_do_you_mean_title")), meanings))

    logger.debug("Found %d suggestion group(s)", len(groups))
    put(record, "defs", groups)
    return record
