"""
Commands for browsing imported journal entries.
"""
from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from lifelog.cli.commands.utils import resolve_engine
from lifelog.core.database import get_session
from lifelog.services.entry_service import EntryService

app = typer.Typer(help="Entry commands")
console = Console()

PREVIEW_LENGTH = 60


def _preview(content: str) -> str:
    first_line = content.splitlines()[0] if content else ""
    if len(first_line) > PREVIEW_LENGTH:
        return first_line[: PREVIEW_LENGTH - 1] + "…"
    return first_line


@app.command("list")
def list_entries(
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum entries to show")] = 20,
    newest_first: Annotated[
        bool, typer.Option("--newest-first", help="Show the most recent entries first")
    ] = False,
    database_url: Annotated[
        Optional[str],
        typer.Option("--database-url", "-d", help="Entry store URL (defaults to LIFELOG_DATABASE_URL)"),
    ] = None,
):
    """List journal entries in timeline order."""
    if limit <= 0:
        raise typer.BadParameter("Limit must be a positive integer.")

    engine = resolve_engine(database_url)
    with get_session(engine) as session:
        service = EntryService(session)
        total = service.count_entries()
        entries = service.get_timeline_entries(limit=limit, newest_first=newest_first)

        table = Table(title=f"Journal Entries ({len(entries)} of {total})")
        table.add_column("Timestamp", style="cyan")
        table.add_column("Mood", style="magenta")
        table.add_column("Activity", style="green")
        table.add_column("Type", style="blue")
        table.add_column("Content", style="white")
        for entry in entries:
            table.add_row(
                entry.timestamp.strftime("%Y-%m-%d %H:%M"),
                entry.mood.value,
                entry.activity.value,
                entry.visualization_type.value,
                _preview(entry.content),
            )
    console.print(table)
