"""init command — interactive setup wizard.

Writes .factorlog.yml with the chosen store backend so later invocations in
the same directory pick it up without flags.
"""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from rich.console import Console

console = Console()

_DEFAULT_PATHS = {"json": ".factorlog", "sqlite": ".factorlog.db"}


@click.command("init")
@click.pass_context
def init_cmd(ctx):
    """Choose where records and command history are stored."""
    console.print("\n[bold cyan]factorlog init[/bold cyan] — setup wizard\n")

    console.print("Store backend:")
    console.print("  [bold]json[/bold]    — one JSON file per collection in a directory (default)")
    console.print("  [bold]sqlite[/bold]  — a single SQLite database file")
    console.print("  [bold]memory[/bold]  — nothing is persisted between runs")
    store_type = click.prompt(
        "Store backend",
        type=click.Choice(["json", "sqlite", "memory"]),
        default="json",
    )

    config: dict = {"store": store_type}

    # None drops the key so the built-in default applies.
    config["store_path"] = None
    if store_type in _DEFAULT_PATHS:
        default_path = _DEFAULT_PATHS[store_type]
        store_path = click.prompt("Store path", default=default_path)
        if store_path != default_path:
            config["store_path"] = store_path

    history_limit = click.prompt("Command history size", type=click.IntRange(min=1), default=200)
    config["history_limit"] = history_limit if history_limit != 200 else None

    config_path = Path(ctx.find_root().params.get("config_path") or ".factorlog.yml")
    _write_config(config_path, config)
    console.print(f"[green]Created {config_path}[/green]")
    console.print("\n[bold green]Setup complete![/bold green]")
    console.print("Add a record with: [bold]factorlog add 12 --label sample-1[/bold]")


def _write_config(path: Path, config: dict) -> None:
    """Write or update the config file, preserving unrelated keys. None values remove a key."""
    existing: dict = {}
    if path.exists():
        existing = yaml.safe_load(path.read_text()) or {}
    for key, value in config.items():
        if value is None:
            existing.pop(key, None)
        else:
            existing[key] = value
    path.write_text(yaml.dump(existing, default_flow_style=False, sort_keys=False))
