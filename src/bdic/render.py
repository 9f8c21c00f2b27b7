# src/bdic/render.py
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from bdic.extractors.base import DictionaryRecord

INDENT = "    "


def render(record: DictionaryRecord, console: Console, *, complete: bool = False) -> None:
    """Print a record the way the terminal dictionary always has."""
    if not record.hit:
        console.print("[red]No result.[/red]")
        if record.list:
            console.print(f"[dim]{escape(record.list)}[/dim]")
        elif record.translation:
            console.print(f"[dim]{escape(record.translation)}[/dim]")
        return

    console.print()
    title = f"[bold underline bright_white]{escape(record.title)}[/]"

    if complete and record.phsym:
        console.print(f"{INDENT}{title}  {escape(record.phsym)}")
        console.print()

    if complete and record.prons:
        line = f"{INDENT}{title}  {escape(record.prons)}"
        if record.rank:
            line += f"  [dim]({escape(record.rank)})[/dim]"
        if record.stars:
            line += f"  [bright_yellow]{'★' * record.stars}[/bright_yellow]"
        console.print(line)
        console.print()

    for label in ("infs", "pattern"):
        value = getattr(record, label)
        if complete and value:
            console.print(f"{INDENT}[bright_cyan]词形[/bright_cyan] [bright_white]{escape(value)}[/bright_white]")
            console.print()

    if record.cdef:
        for item in record.cdef:
            console.print(f"{INDENT}[bright_cyan]{escape(item.pos)}[/bright_cyan] [bright_white]{escape(item.definition)}[/bright_white]")
        console.print()

    if record.basic:
        for line in record.basic:
            console.print(f"{INDENT}[bright_white]{escape(line)}[/bright_white]")
        console.print()

    if record.defs:
        for group in record.defs:
            if group.title:
                console.print(f"{INDENT}[bright_cyan]{escape(group.title)}[/bright_cyan]")
            for meaning in group.meanings:
                console.print(f"{INDENT}  [bright_white]{escape(meaning.word)}[/bright_white] {escape(meaning.definition)}")
            console.print()

    if complete and record.sentences:
        console.print(f"{INDENT}[black on white] 例句 [/black on white]")
        console.print()
        for i, s in enumerate(record.sentences, start=1):
            console.print(f"{INDENT}[bright_white]{i}.[/bright_white] [bright_white]{escape(s.en)}[/bright_white]   [dim]({escape(s.source)})[/dim]")
            console.print(f"{INDENT}   {escape(s.chs)}")
            console.print()

    if complete and record.sentence:
        console.print(f"{INDENT}[black on white] 例句 [/black on white]")
        console.print()
        for i, line in enumerate(record.sentence, start=1):
            console.print(f"{INDENT}[bright_white]{i}.[/bright_white] [bright_white]{escape(line)}[/bright_white]")
            console.print()

    if complete and record.discrimination:
        console.print(f"{INDENT}[bright_cyan]辨析[/bright_cyan] {escape(record.discrimination)}")
        console.print()

    if complete and record.translation:
        console.print(f"{INDENT}[bright_cyan]翻译[/bright_cyan] {escape(record.translation)}")
        console.print()
