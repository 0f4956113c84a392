"""Output formatters for the CLI.

Snippets are shown either as a Rich table or as JSON records.
"""

from .json import format_snippets_json
from .table import format_snippets_table

__all__ = [
    "format_snippets_json",
    "format_snippets_table",
]
