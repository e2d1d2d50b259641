"""export command — dump the record collection as JSON."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from factorlog_cli.session import get_app
from factorlog_core.app import export_filename

console = Console()


@click.command("export")
@click.option(
    "--output",
    "-o",
    "output_path",
    default=None,
    help="Write to this file. Use '-' to print instead.",
)
@click.pass_context
def export_cmd(ctx, output_path: str | None):
    """Export all records as JSON.

    Writes records_<timestamp>.json in the current directory unless --output
    is given.
    """
    app = get_app(ctx)
    text = app.export_records_as_json()

    if output_path == "-":
        click.echo(text)
        return

    path = Path(output_path or export_filename())
    path.write_text(text + "\n", encoding="utf-8")
    console.print(f"[green]Exported {len(app.list_records())} records to {path}[/green]")
