"""Record commands — add, list (with search) and delete."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from factorlog_cli.session import get_app
from factorlog_core.errors import ValidationError

console = Console()


@click.command("add", context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.option("--label", "-l", default=None, help="Optional free-text label.")
@click.pass_context
def add_cmd(ctx, value: str, label: str | None):
    """Create a record holding the integer VALUE."""
    app = get_app(ctx)
    try:
        record = app.create_record(label, value)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="VALUE")
    console.print(f"[green]Record created[/green] ID: [bold]{record.id}[/bold]")


@click.command("list")
@click.option("--query", "-q", default="", help="Search by label, id or value (case-insensitive).")
@click.pass_context
def list_cmd(ctx, query: str):
    """Show records, newest first."""
    app = get_app(ctx)
    records = app.search_records(query)
    if not records:
        if query.strip():
            console.print(f"[yellow]No records match {escape(query)!r}.[/yellow]")
        else:
            console.print("[yellow]No records yet — create one with `factorlog add`.[/yellow]")
        return

    table = Table(title="Records", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Label", max_width=30)
    table.add_column("Value", justify="right")
    table.add_column("Created", width=20)

    for r in records:
        table.add_row(
            r.id,
            escape(r.label) if r.label is not None else "[dim]—[/dim]",
            str(r.value),
            r.created_at[:19].replace("T", " "),
        )

    console.print(table)
    console.print(f"[dim]{len(records)} records shown[/dim]")


@click.command("delete")
@click.argument("record_id")
@click.pass_context
def delete_cmd(ctx, record_id: str):
    """Delete RECORD_ID and its command history. Unknown ids are ignored."""
    app = get_app(ctx)
    app.delete_record(record_id)
    console.print(f"Record deleted: {escape(record_id)}")
