"""Output formatting utilities: text vs JSON, rich panels."""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from arabic_search.core.schema import MatchRecord

console = Console()
error_console = Console(stderr=True)

NO_MATCHES = "No matches found."


def is_piped() -> bool:
    return not sys.stdout.isatty()


def output(data: Any, fmt: str | None = None, title: str | None = None) -> None:
    """Output data in the requested format.

    If fmt is None, auto-detect: json when piped, text for TTY.
    """
    if fmt is None:
        fmt = "json" if is_piped() else "text"

    if fmt == "json":
        if isinstance(data, str):
            print(json.dumps({"value": data}, ensure_ascii=False))
        elif hasattr(data, "model_dump"):
            print(data.model_dump_json(indent=2))
        elif isinstance(data, (dict, list)):
            print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
        else:
            print(json.dumps({"value": str(data)}, default=str, ensure_ascii=False))
    else:
        if isinstance(data, str):
            if title:
                console.print(Panel(data, title=title))
            else:
                console.print(data)
        elif hasattr(data, "model_dump"):
            console.print_json(data.model_dump_json(indent=2))
        elif isinstance(data, (dict, list)):
            console.print_json(json.dumps(data, default=str, ensure_ascii=False))
        else:
            console.print(str(data))


def highlighted_line(record: MatchRecord) -> Text:
    text = Text(record.matched_line_text)
    if record.match_start is not None and record.match_end is not None:
        text.stylize("bold yellow", record.match_start, record.match_end)
    return text


def render_match(record: MatchRecord) -> Panel:
    """Result entry: title, previous line for context, the matched line, and where to jump."""
    body = Group(
        Text(record.context_line_text, style="dim"),
        highlighted_line(record),
    )
    return Panel(
        body,
        title=Text(record.title, style="bold"),
        title_align="left",
        subtitle=Text(record.locator),
        subtitle_align="right",
    )


def output_matches(records: list[MatchRecord], fmt: str | None = None) -> None:
    if fmt is None:
        fmt = "json" if is_piped() else "text"

    if fmt == "json":
        output([r.model_dump() for r in records], fmt="json")
    elif not records:
        info(NO_MATCHES)
    else:
        for record in records:
            console.print(render_match(record))


def error(msg: str) -> None:
    error_console.print(f"[red]Error:[/red] {msg}")


def success(msg: str) -> None:
    console.print(f"[green]{msg}[/green]")


def info(msg: str) -> None:
    console.print(f"[dim]{msg}[/dim]")
