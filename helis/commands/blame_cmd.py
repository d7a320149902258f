"""Blame command - print the hover text for one line from the terminal."""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..blame import AttributionSource, GitBlameSource, lookup_attribution


def run_blame(
    path: Path,
    line: int,
    *,
    source: AttributionSource | None = None,
    console: Console | None = None,
) -> int:
    """
    Look up attribution for one line and print it.

    Uses the same lookup as the hover feature, so this is the quickest way
    to see what an editor would show.

    Returns:
        Exit code: 0 when attribution was printed, 1 otherwise
    """
    console = console or Console()
    source = source or GitBlameSource()

    record = asyncio.run(lookup_attribution(source, path.resolve(), line))
    if record is None:
        console.print(f"[yellow]No attribution for {escape(str(path))}:{line}[/yellow]")
        return 1

    text = Text()
    text.append(record.commit_id, style="bold yellow")
    text.append(" ")
    text.append(record.author_identifier, style="cyan")
    text.append(" ")
    text.append(record.summary)
    console.print(text)
    return 0
