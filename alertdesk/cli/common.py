"""Helpers shared by alertdesk CLI commands."""

import asyncio
from typing import Any, Coroutine, TypeVar

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from alertdesk.config import AppConfig
from alertdesk.store import AlertStore

console = Console()

T = TypeVar("T")


def get_app_config(ctx: click.Context) -> AppConfig:
    """The configuration loaded by the root command."""
    obj = ctx.find_root().obj or {}
    return obj.get("config") or AppConfig()


def get_store(ctx: click.Context) -> AlertStore:
    """Build the alert store described by the configuration.

    The store is not loaded yet; call ``await store.load()`` inside the
    command's event loop.
    """
    from alertdesk.storage import SQLiteStorage

    config = get_app_config(ctx)
    storage = SQLiteStorage(config.storage.path)
    return AlertStore(storage, key=config.storage.key)


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion from a synchronous command."""
    return asyncio.run(coro)


def print_error(message: str, title: str = "Error") -> None:
    console.print(Panel(
        f"[red]{escape(message)}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def fail(message: str, title: str = "Error") -> None:
    """Print an error panel and exit with status 1."""
    print_error(message, title)
    raise SystemExit(1)


def print_load_error(store: AlertStore) -> None:
    """Show the store's load error, if any."""
    if store.error:
        console.print(Panel(
            f"[yellow]{store.error}. Showing default alerts.[/yellow]",
            title="[bold yellow]Warning[/bold yellow]",
            border_style="yellow",
        ))
