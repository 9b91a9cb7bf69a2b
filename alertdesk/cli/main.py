"""Main CLI entry point for alertdesk.

This module provides the main click group and lazy loading
of command modules to keep startup fast.
"""

import importlib
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from alertdesk.cli.common import console, fail
from alertdesk.config import ConfigError, get_config_path, load_config, write_template_config


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when one of their commands is
    actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, tuple[str, str]] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to
                (module path, attribute name).
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Import a command from its module and register it."""
        module_path, attr_name = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        cmd = getattr(module, attr_name, None)
        if not isinstance(cmd, click.Command):
            raise click.ClickException(f"'{attr_name}' in {module_path} is not a click command")

        self.add_command(cmd, cmd_name)
        return cmd


LAZY_SUBCOMMANDS = {
    # Alerts
    "list": ("alertdesk.cli.alerts", "list_alerts"),
    "show": ("alertdesk.cli.alerts", "show_alert"),
    "create": ("alertdesk.cli.alerts", "create_alert"),
    "edit": ("alertdesk.cli.alerts", "edit_alert"),
    "toggle": ("alertdesk.cli.alerts", "toggle_alert"),
    "duplicate": ("alertdesk.cli.alerts", "duplicate_alert"),
    "delete": ("alertdesk.cli.alerts", "delete_alert"),
    # Reference data
    "reports": ("alertdesk.cli.catalog", "list_reports"),
    "symbols": ("alertdesk.cli.catalog", "list_symbols"),
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="alertdesk")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Configuration file to use.")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """alertdesk - manage report, price, news, publication and scheduled alerts.

    \b
    Quick Start:
      alertdesk list                         # Browse alerts
      alertdesk reports                      # Browse the report catalog
      alertdesk create news "OPEC" --keywords OPEC
      alertdesk toggle ALERT_ID              # Pause or resume an alert
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand == "init-config":
        return

    try:
        config = load_config(config_path)
    except ConfigError as e:
        fail(str(e), title="Configuration Error")

    ctx.obj["config"] = config
    setup_logging("DEBUG" if verbose else config.log.level)


@cli.command("init-config")
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
@click.pass_context
def init_config(ctx: click.Context, force: bool) -> None:
    """Write a configuration file with the default settings."""
    path = ctx.obj.get("config_path") or get_config_path()
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists. Use --force to overwrite it.[/yellow]")
        return

    written = write_template_config(path)
    console.print(f"[green]✓ Wrote {written}[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
