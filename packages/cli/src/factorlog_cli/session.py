"""Lazy access to the App shared by every subcommand of one invocation."""

from __future__ import annotations

from contextlib import contextmanager

import click

from factorlog_core.app import App
from factorlog_store.base import StoreError


@contextmanager
def store_errors_as_click():
    """Turn a failed write into a one-line CLI error instead of a traceback."""
    try:
        yield
    except StoreError as e:
        raise click.ClickException(f"Could not save: {e}") from e


def _close_app(app: App) -> None:
    with store_errors_as_click():
        app.close()


def get_app(ctx: click.Context) -> App:
    """Return the session's App, opening the store on first call.

    The App is closed (final save, store released) when the root context
    closes.
    """
    root = ctx.find_root()
    root.ensure_object(dict)
    app = root.obj.get("app")
    if app is None:
        factory = root.obj.get("app_factory")
        if factory is None:
            raise click.UsageError("No store configured.")
        app = factory()
        root.obj["app"] = app
        root.call_on_close(lambda: _close_app(app))
    return app
