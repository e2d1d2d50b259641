"""run command — execute a named command and print its output."""

from __future__ import annotations

import click
from rich.console import Console

from factorlog_cli.session import get_app
from factorlog_core.engine import CHECK, CHECK_ALL

console = Console()


def _run_and_print(ctx: click.Context, command: str, record_id: str | None) -> None:
    app = get_app(ctx)
    run = app.run_command(command, record_id)
    if run.output:
        # Raw echo: outputs and labels may contain rich markup characters.
        click.echo(run.output)
    else:
        console.print("[dim](no output)[/dim]")


@click.command("run")
@click.argument("command")
@click.option("--record", "-r", "record_id", default=None, help="Target record id.")
@click.pass_context
def run_cmd(ctx, command: str, record_id: str | None):
    """Run COMMAND and record it in the command history.

    \b
    Known commands:
      check      composite check on --record
      check:all  composite check on every record
    """
    _run_and_print(ctx, command, record_id)


@click.command("check")
@click.argument("record_id")
@click.pass_context
def check_cmd(ctx, record_id: str):
    """Check whether RECORD_ID's value is a product of two integers > 1."""
    _run_and_print(ctx, CHECK, record_id)


@click.command("check-all")
@click.pass_context
def check_all_cmd(ctx):
    """Check every record."""
    _run_and_print(ctx, CHECK_ALL, None)
