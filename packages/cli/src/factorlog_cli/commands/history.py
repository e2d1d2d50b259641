"""history and show commands — inspect the command log."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from factorlog_cli.session import get_app

console = Console()


def _first_line(text: str, width: int = 50) -> str:
    line = text.split("\n", 1)[0]
    return line if len(line) <= width else line[: width - 1] + "…"


@click.command("history")
@click.option("--limit", default=20, show_default=True, help="Maximum number of runs to show.")
@click.option("--delete", "delete_id", default=None, help="Remove one run from the log instead.")
@click.pass_context
def history_cmd(ctx, limit: int, delete_id: str | None):
    """Show recent command runs, newest first."""
    app = get_app(ctx)

    if delete_id is not None:
        app.delete_command(delete_id)
        console.print(f"Command log deleted: {escape(delete_id)}")
        return

    runs = app.get_command_history()
    if not runs:
        console.print("[yellow]No commands run yet. Run a check to see results here.[/yellow]")
        return

    runs = runs[:limit]

    table = Table(title="Command History", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("When", width=20)
    table.add_column("Command", no_wrap=True)
    table.add_column("Record", no_wrap=True)
    table.add_column("Output")

    _verdict_style = {"YES": "green", "NO": "red"}

    for run in runs:
        summary = escape(_first_line(run.output))
        style = _verdict_style.get(run.output.split(":", 1)[0])
        if style:
            summary = f"[{style}]{summary}[/{style}]"
        table.add_row(
            run.id,
            run.started_at[:19].replace("T", " "),
            escape(run.command),
            run.record_id or "[dim]—[/dim]",
            summary,
        )

    console.print(table)


@click.command("show")
@click.argument("run_id", required=False)
@click.pass_context
def show_cmd(ctx, run_id: str | None):
    """Print the full output of RUN_ID, or of the latest run."""
    app = get_app(ctx)

    if run_id is None:
        output = app.latest_output()
        if output is None:
            console.print("[yellow]No output yet.[/yellow]")
            return
    else:
        run = app.commands.get(run_id)
        if run is None:
            raise click.UsageError(f"No command run with id {run_id!r}.")
        output = run.output

    click.echo(output)
