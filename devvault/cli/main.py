"""Main CLI entry point and application setup."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
from click.exceptions import Exit
from rich.console import Console

from devvault import __version__
from devvault.cli.commands import snippet
from devvault.cli.config import load_config
from devvault.cli.ui import print_banner
from devvault.core.exceptions import VaultError
from devvault.storage.store import SnippetStore, resolve_location


@dataclass
class Context:
    """CLI context that holds shared resources."""

    store: SnippetStore
    console: Console
    config: dict[str, Any] = field(default_factory=dict)
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.ERROR
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(
    no_color: bool = False, width: int | None = None, stderr: bool = False
) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=width or 120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
        stderr=stderr,
    )


class VaultGroup(click.Group):
    """Custom group that turns unexpected errors into a clean exit."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print(f"[red]Error:[/red] {e}", highlight=False)
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=VaultGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--no-banner", is_flag=True, help="Do not print the banner")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__, prog_name="dev-vault", message="dev-vault version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    no_banner: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """A developer's CLI code snippet manager.

    Store shell commands under a short key, find them again by keyword,
    and copy them straight to the clipboard.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    try:
        config_data = load_config(config)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    no_color = no_color or not config_data.get("color", True)
    console = create_console(no_color=no_color, width=config_data.get("width"))

    if not (no_banner or quiet) and config_data.get("banner", True):
        print_banner(
            create_console(
                no_color=no_color, width=config_data.get("width"), stderr=True
            )
        )

    try:
        store = SnippetStore(resolve_location())
    except VaultError as e:
        if debug:
            raise
        console.print(f"[red]Error initializing application:[/red] {e}", highlight=False)
        ctx.exit(1)

    ctx.obj = Context(store=store, console=console, config=config_data, debug=debug)


cli.add_command(snippet.add)
cli.add_command(snippet.list_cmd, name="list")
cli.add_command(snippet.get)
cli.add_command(snippet.search)
cli.add_command(snippet.delete)


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
