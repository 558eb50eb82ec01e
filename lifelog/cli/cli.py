"""
Main CLI application using Typer.

Entry point: python -m lifelog.cli
CLI Name: lifelog-admin
"""
import typer

from lifelog import __version__ as app_version
from lifelog.cli.commands import entries, import_cmd

app = typer.Typer(
    name="lifelog-admin",
    help="Lifelog Admin CLI - import legacy life-logging databases and browse entries",
)

app.add_typer(import_cmd.app, name="import")
app.add_typer(entries.app, name="entries")


@app.command()
def version():
    """Show CLI version information."""
    typer.echo(f"Lifelog CLI version {app_version}")
