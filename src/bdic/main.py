# src/bdic/main.py
from __future__ import annotations

import asyncio
import json
import logging
from enum import Enum
from importlib.metadata import PackageNotFoundError, version as package_version
from typing import List, Optional

import aiohttp
import typer
from rich.console import Console

from bdic.config import Settings, load_settings
from bdic.errors import LookupFailed, UnknownDictionaryError
from bdic.extractors.base import BaseExtractor, DictionaryRecord
from bdic.extractors.bing import BingExtractor
from bdic.extractors.youdao import YoudaoExtractor
from bdic.fetchers.http import HttpFetcher
from bdic.logging import setup_logger
from bdic.render import render

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="bdic",
    help="Get the definition of a word.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

NETWORK_FAILURE = "Network error"

EXTRACTORS = {
    "bing": BingExtractor,
    "youdao": YoudaoExtractor,
}


class Dictionary(str, Enum):
    bing = "bing"
    youdao = "youdao"


def pick_extractor(name: str, fetcher: HttpFetcher, settings: Settings) -> BaseExtractor:
    try:
        extractor_cls = EXTRACTORS[name]
    except KeyError:
        raise UnknownDictionaryError(f"No extractor configured for dictionary: {name}", dictionary=name) from None
    return extractor_cls(fetcher, settings.base_url(name))


async def run(word: str, dictionary: str, settings: Settings) -> DictionaryRecord:
    async with HttpFetcher(timeout_seconds=settings.timeout_seconds, user_agent=settings.user_agent) as fetcher:
        extractor = pick_extractor(dictionary, fetcher, settings)
        return await extractor.lookup(word)


def _version_callback(value: bool) -> None:
    if value:
        try:
            console.print(package_version("bdic"))
        except PackageNotFoundError:
            console.print("unknown")
        raise typer.Exit()


@app.command()
def main(
    words: List[str] = typer.Argument(..., help="Word or phrase to look up"),
    complete: bool = typer.Option(False, "--complete", "-c", help="Show complete definition"),
    dictionary: Optional[Dictionary] = typer.Option(None, "--dict", "-d", help="Dictionary (default bing)"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log what is going on"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show version"),
):
    """Get the definition of a word, e.g. `bdic hello` or `bdic -c world`."""
    setup_logger(logging.DEBUG if verbose else logging.WARNING)
    settings = load_settings()
    name = dictionary.value if dictionary else settings.default_dict
    word = " ".join(words)

    try:
        with err_console.status("Loading…"):
            record = asyncio.run(run(word, name, settings))
    except LookupFailed as e:
        err_console.print(e.message, style="red", markup=False, highlight=False)
        raise typer.Exit(1)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.debug("Lookup of %r failed", word, exc_info=True)
        err_console.print(str(e) or NETWORK_FAILURE, style="red", markup=False, highlight=False)
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(record.to_dict(), ensure_ascii=False))
        return
    render(record, console, complete=complete)


if __name__ == "__main__":
    app()
