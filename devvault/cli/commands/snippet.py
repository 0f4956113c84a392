"""Snippet management CLI commands."""

import click
from rich.console import Console
from rich.markup import escape

from devvault.cli.clipboard import copy_to_clipboard
from devvault.cli.formatters import format_snippets_json, format_snippets_table
from devvault.cli.ui import StatusIcon, notify, report_result
from devvault.core.exceptions import ClipboardError
from devvault.core.models import Snippet
from devvault.operations.handlers import (
    AddCommand,
    AddHandler,
    DeleteCommand,
    DeleteHandler,
    GetCommand,
    GetHandler,
    ListHandler,
    SearchCommand,
    SearchHandler,
)
from devvault.operations.results import OperationResult, ResultStatus

FORMAT_CHOICES = ["table", "json"]


def get_store(ctx):
    """Get the snippet store from context."""
    return ctx.obj.store


def get_add_handler(ctx):
    """Get an add handler instance."""
    return AddHandler(get_store(ctx))


def get_list_handler(ctx):
    """Get a list handler instance."""
    return ListHandler(get_store(ctx))


def get_get_handler(ctx):
    """Get a get handler instance."""
    return GetHandler(get_store(ctx))


def get_search_handler(ctx):
    """Get a search handler instance."""
    return SearchHandler(get_store(ctx))


def get_delete_handler(ctx):
    """Get a delete handler instance."""
    return DeleteHandler(get_store(ctx))


def parse_tags(values: tuple[str, ...]) -> list[str]:
    """Split repeated, comma-separated tag options into a flat list."""
    tags = []
    for value in values:
        for tag in value.split(","):
            tag = tag.strip()
            if tag:
                tags.append(tag)
    return tags


def _fail(ctx: click.Context, console: Console, result: OperationResult) -> None:
    """Report a failed result and exit with status 1."""
    report_result(console, result)
    ctx.exit(1)


def _display_snippets(
    console: Console,
    snippets: list[Snippet],
    output_format: str,
) -> None:
    if output_format == "json":
        click.echo(format_snippets_json(snippets))
        return

    if not snippets:
        notify(console, "No snippets found.", "warning")
        return

    console.print(format_snippets_table(snippets))


# Command: add
@click.command()
@click.option("--key", "-k", required=True, help="Unique key for the snippet")
@click.option("--description", "-d", required=True, help="What the snippet does")
@click.option("--command", "-c", required=True, help="The command to store")
@click.option(
    "--tags",
    "-t",
    multiple=True,
    help="Tags, comma-separated; may be repeated",
)
@click.option("--dry-run", is_flag=True, help="Show what would be added")
@click.pass_context
def add(
    ctx: click.Context,
    key: str,
    description: str,
    command: str,
    tags: tuple[str, ...],
    dry_run: bool,
) -> None:
    """Add a new snippet."""
    console = ctx.obj.console

    add_command = AddCommand(
        key=key,
        description=description,
        command=command,
        tags=parse_tags(tags),
        dry_run=dry_run,
    )
    result = get_add_handler(ctx).execute(add_command)

    if result.status.is_failure():
        _fail(ctx, console, result)

    report_result(console, result)
    if result.status == ResultStatus.DRY_RUN:
        console.print(format_snippets_table(result.snippets))


# Command: list
@click.command()
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default="table",
    help="Output format",
)
@click.pass_context
def list_cmd(ctx: click.Context, output_format: str) -> None:
    """List all saved snippets."""
    console = ctx.obj.console

    result = get_list_handler(ctx).execute()
    if result.status.is_failure():
        _fail(ctx, console, result)

    _display_snippets(console, result.snippets, output_format)


# Command: get
@click.command()
@click.argument("key")
@click.option(
    "--no-copy",
    is_flag=True,
    help="Print the command instead of copying it to the clipboard",
)
@click.pass_context
def get(ctx: click.Context, key: str, no_copy: bool) -> None:
    """Get a snippet and copy its command to the clipboard."""
    console = ctx.obj.console

    result = get_get_handler(ctx).execute(GetCommand(key=key))
    if result.status == ResultStatus.NOT_FOUND:
        report_result(console, result)
        return
    if result.status.is_failure():
        _fail(ctx, console, result)

    snippet = result.snippet
    console.print(
        f"[green]Found:[/green] '{escape(snippet.description)}'", highlight=False
    )

    if no_copy:
        click.echo(snippet.command)
        return

    try:
        copy_to_clipboard(snippet.command)
    except ClipboardError as e:
        notify(console, str(e), "error")
        ctx.exit(1)

    notify(console, "Copied command to clipboard!", "success")


# Command: search
@click.command()
@click.argument("keyword")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default="table",
    help="Output format",
)
@click.pass_context
def search(ctx: click.Context, keyword: str, output_format: str) -> None:
    """Search snippets by keyword in key, description and tags."""
    console = ctx.obj.console

    result = get_search_handler(ctx).execute(SearchCommand(keyword=keyword))
    if result.status.is_failure():
        _fail(ctx, console, result)

    if output_format == "json":
        _display_snippets(console, result.snippets, output_format)
        return

    if result.status == ResultStatus.NOT_FOUND:
        notify(console, result.message)
        return

    console.print(
        f"{StatusIcon.SEARCH} [bold blue]Search:[/bold blue] "
        f"Found {len(result.snippets)} matches:"
    )
    _display_snippets(console, result.snippets, output_format)


# Command: delete
@click.command()
@click.argument("key")
@click.option("--dry-run", is_flag=True, help="Show what would be deleted")
@click.pass_context
def delete(ctx: click.Context, key: str, dry_run: bool) -> None:
    """Delete a snippet."""
    console = ctx.obj.console

    result = get_delete_handler(ctx).execute(DeleteCommand(key=key, dry_run=dry_run))

    if result.status == ResultStatus.SUCCESS:
        console.print(
            f"{StatusIcon.REMOVED} [bold red]Removed:[/bold red] "
            f"Deleted snippet: [cyan]{escape(key)}[/cyan]",
            highlight=False,
        )
    elif result.status.is_failure():
        _fail(ctx, console, result)
    else:
        report_result(console, result)
