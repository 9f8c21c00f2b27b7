# src/bdic/extractors/text.py
from __future__ import annotations

import re
from typing import Optional

from bs4.element import NavigableString, PreformattedString, Tag

_WHITESPACE = re.compile(r"\s+")
# zero-width space/joiners and BOM left over from the upstream templates
_ARTIFACTS = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")
_NON_TEXT_PARENTS = frozenset({"script", "style", "template"})


def normalize(text: Optional[str]) -> str:
    """Collapse whitespace runs to single spaces and trim. Idempotent."""
    if not text:
        return ""
    text = _ARTIFACTS.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()


def plain_text(node: Tag, exclude: Optional[str] = None) -> str:
    """
    Plain-text projection of `node`: inline markup (search-term spans,
    <b> emphasis, ...) collapses to its own text. Anything matching the
    `exclude` selector is left out. The tree itself is not touched.
    """
    skipped = set()
    if exclude:
        skipped = {id(el) for el in node.select(exclude)}

    parts = []
    for string in node.descendants:
        if not isinstance(string, NavigableString) or isinstance(string, PreformattedString):
            continue
        if string.parent is not None and string.parent.name in _NON_TEXT_PARENTS:
            continue
        if skipped and _inside(string, node, skipped):
            continue
        parts.append(str(string))
    return "".join(parts)


def _inside(string: NavigableString, root: Tag, skipped: set) -> bool:
    for parent in string.parents:
        if parent is root:
            return False
        if id(parent) in skipped:
            return True
    return False


def select_text(node: Tag, selector: str) -> str:
    """Text of every element matching `selector`, concatenated in document order."""
    return "".join(plain_text(el) for el in node.select(selector))
