"""
Import commands for legacy life-logging databases.
"""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeRemainingColumn
from rich.table import Table

from lifelog.cli.commands.utils import resolve_engine
from lifelog.cli.logging import setup_cli_logging
from lifelog.core.config import settings
from lifelog.core.database import get_session
from lifelog.core.exceptions import ImportCancelledError, LegacyImportError
from lifelog.data_transfer.legacy_sqlite.extractor import field_for_column
from lifelog.schemas.dto import ImportRunResult
from lifelog.services.import_service import ImportService
from lifelog.utils.import_export import ProgressCallback, create_throttled_progress_callback

app = typer.Typer(help="Import commands")
console = Console()

MAX_ERRORS_SHOWN = 20

PathArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="Path to the legacy SQLite database",
    ),
]
DatabaseUrlOption = Annotated[
    Optional[str],
    typer.Option("--database-url", "-d", help="Entry store URL (defaults to LIFELOG_DATABASE_URL)"),
]


def _run_cancellable_import(
    service: ImportService,
    path: Path,
    progress_callback: ProgressCallback,
) -> ImportRunResult:
    """Run the import on a worker thread; Ctrl-C cancels it at the next checkpoint."""
    cancel_event = threading.Event()
    outcome: dict[str, Any] = {}

    def worker() -> None:
        try:
            outcome["result"] = service.import_from(
                path,
                progress_callback=progress_callback,
                cancel_event=cancel_event,
            )
        except Exception as exc:  # re-raised on the calling thread
            outcome["error"] = exc

    thread = threading.Thread(target=worker, name="legacy-import", daemon=True)
    thread.start()
    try:
        while thread.is_alive():
            thread.join(timeout=0.2)
    except KeyboardInterrupt:
        cancel_event.set()
        thread.join()

    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]


@app.command("run")
def run_import(
    path: PathArgument,
    database_url: DatabaseUrlOption = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose logging")] = False,
):
    """Import all entries from a legacy database into the entry store."""
    logger = setup_cli_logging("import", verbose=verbose)
    logger.info(f"Importing legacy database {path}")
    engine = resolve_engine(database_url)

    with get_session(engine) as session:
        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeRemainingColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Importing entries...", total=None)

            def on_progress(processed: int, total: int) -> None:
                progress.update(task, completed=processed, total=total or None)

            try:
                result = _run_cancellable_import(
                    ImportService(session),
                    path,
                    create_throttled_progress_callback(on_progress, settings.progress_throttle_seconds),
                )
            except ImportCancelledError:
                console.print("[yellow]Import cancelled; no entries were saved[/yellow]")
                raise typer.Exit(code=130)
            except LegacyImportError as exc:
                console.print(f"[red]Import failed: {exc}[/red]")
                raise typer.Exit(code=1)

    table = Table(title="Import Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Source table", result.source_table or "-")
    table.add_row("Rows processed", str(result.total_processed))
    table.add_row("Entries imported", str(result.entries_imported))
    table.add_row("Duplicates skipped", str(result.duplicates_skipped))
    table.add_row("Entries skipped (errors)", str(result.entries_skipped))
    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if result.has_errors:
        console.print(f"[yellow]Import completed with {result.error_count} errors[/yellow]")
        for message in result.errors[:MAX_ERRORS_SHOWN]:
            console.print(f"  • {message}")
        if result.error_count > MAX_ERRORS_SHOWN:
            console.print(f"  … and {result.error_count - MAX_ERRORS_SHOWN} more")
    else:
        console.print(
            f"[green]Successfully imported {result.entries_imported} entries. "
            f"{result.duplicates_skipped} duplicates skipped.[/green]"
        )


@app.command("inspect")
def inspect_source(path: PathArgument):
    """Show which table and columns an import would read."""
    setup_cli_logging("inspect")
    try:
        schema, row_count = ImportService.inspect_source(path)
    except LegacyImportError as exc:
        console.print(f"[red]Inspection failed: {exc}[/red]")
        raise typer.Exit(code=1)

    console.print(f"Tables: {', '.join(schema.tables) or '-'}")
    if not schema.entries_table:
        console.print("[red]No entries table found in the database[/red]")
        raise typer.Exit(code=1)

    console.print(f"Entries table: [cyan]{schema.entries_table}[/cyan] ({row_count} rows)")
    table = Table(title="Columns")
    table.add_column("Column", style="cyan")
    table.add_column("Declared type", style="white")
    table.add_column("Maps to", style="green")
    for column in schema.columns:
        table.add_row(column.name, column.type or "-", field_for_column(column.name) or "metadata")
    console.print(table)
