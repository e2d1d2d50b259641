"""CLI entry point for factorlog.

Commands:
  add        — create an integer record
  list       — show records, optionally filtered by a search query
  delete     — delete a record and the command runs that reference it
  run        — run a named command (check, check:all, ...)
  check      — shortcut for `run check --record ID`
  check-all  — shortcut for `run check:all`
  history    — show the command log, or remove one entry from it
  show       — print the full output of a command run
  export     — dump the records as JSON
  init       — interactive setup wizard
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.console import Console

from factorlog_cli.commands.export import export_cmd
from factorlog_cli.commands.history import history_cmd, show_cmd
from factorlog_cli.commands.init import init_cmd
from factorlog_cli.commands.records import add_cmd, delete_cmd, list_cmd
from factorlog_cli.commands.run import check_all_cmd, check_cmd, run_cmd
from factorlog_cli.session import store_errors_as_click
from factorlog_core.config import STORE_BACKENDS

console = Console()


def _build_store(config: dict):
    """Instantiate the configured store from .factorlog.yml settings.

    Store selection hierarchy:
      store: sqlite → SQLiteStore   (store_path or .factorlog.db)
      store: memory → MemoryStore   (nothing persisted)
      (default)     → JSONFileStore (store_path or .factorlog/)

    This factory lives in cli.py so neither factorlog_core nor factorlog_store
    know about the CLI config format.
    """
    store_type = config.get("store") or "json"
    store_path = config.get("store_path")

    if store_type not in STORE_BACKENDS:
        console.print(f"[yellow]Unknown store {store_type!r}. Falling back to the JSON file store.[/yellow]")
        store_type = "json"

    if store_type == "sqlite":
        from factorlog_store.sqlite import SQLiteStore

        return SQLiteStore(db_path=store_path or ".factorlog.db")

    if store_type == "memory":
        from factorlog_store.memory import MemoryStore

        return MemoryStore()

    from factorlog_store.jsonfile import JSONFileStore

    return JSONFileStore(directory=store_path or ".factorlog")


def _open_app(config: dict):
    from factorlog_core.app import App

    return App(_build_store(config), history_limit=config["history_limit"])


class FactorlogGroup(click.Group):
    """Command group that reports store write failures as CLI errors."""

    def invoke(self, ctx: click.Context):
        with store_errors_as_click():
            return super().invoke(ctx)


@click.group(cls=FactorlogGroup)
@click.version_option(
    version=importlib.metadata.version("factorlog"),
    prog_name="factorlog",
)
@click.option(
    "--config",
    "config_path",
    default=".factorlog.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="FACTORLOG_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Keep integer records and check which ones are composite."""
    from factorlog_core.config import load_config

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ctx.ensure_object(dict)

    try:
        config = load_config(config_path)
    except (ValueError, OSError) as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e

    ctx.obj["config"] = config
    # The store is opened on first use so `init` and `--help` never touch it.
    ctx.obj["app_factory"] = lambda: _open_app(config)


main.add_command(add_cmd)
main.add_command(list_cmd)
main.add_command(delete_cmd)
main.add_command(run_cmd)
main.add_command(check_cmd)
main.add_command(check_all_cmd)
main.add_command(history_cmd)
main.add_command(show_cmd)
main.add_command(export_cmd)
main.add_command(init_cmd)
