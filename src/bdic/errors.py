# src/bdic/errors.py
from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup

from bdic.extractors.text import normalize, select_text

GENERIC_FAILURE = "Request failed"


class BdicError(Exception):
    """Base class for lookup errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class LookupFailed(BdicError):
    """The upstream answered with a non-success status."""

    @property
    def status(self) -> int | None:
        return self.context.get("status")


class UnknownDictionaryError(BdicError, ValueError):
    """No extractor is configured for the requested dictionary."""


def describe_error(body: str | None, status_text: str | None = None) -> str:
    """
    Human-readable message for a failed response.
    The service answers errors with an HTML page; when that page carries an
    `.sc_error` message, that is used. Otherwise the raw body, then the
    status text.
    """
    body = body or ""
    if body.startswith("<!"):
        soup = BeautifulSoup(body, "lxml")
        message = normalize(select_text(soup, ".sc_error"))
        if message:
            return message

    return body or status_text or GENERIC_FAILURE
