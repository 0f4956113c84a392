"""Table formatters for Rich console output."""

from rich.box import HEAVY_HEAD
from rich.table import Table
from rich.text import Text

from devvault.core.models import Snippet


def format_snippets_table(snippets: list[Snippet]) -> Table:
    """Format snippets as a Rich table, one row per snippet in given order."""
    table = Table(
        box=HEAVY_HEAD,
        show_header=True,
        header_style="bold",
        show_lines=True,
    )

    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Command", style="green", overflow="fold")
    table.add_column("Tags", style="blue")

    for snippet in snippets:
        # Text cells keep brackets in commands from being read as markup
        table.add_row(
            Text(snippet.key),
            Text(snippet.description),
            Text(snippet.command),
            Text(", ".join(snippet.tags)),
        )

    return table
