"""Snippet operations: pure collection functions and store-backed handlers."""

from .crud import (
    add_snippet,
    delete_snippets,
    get_snippet,
    list_snippets,
    search_snippets,
)
from .handlers import (
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
from .results import OperationResult, ResultStatus

__all__ = [
    # Pure operations
    "add_snippet",
    "list_snippets",
    "get_snippet",
    "search_snippets",
    "delete_snippets",
    # Commands and handlers
    "AddCommand",
    "AddHandler",
    "ListHandler",
    "GetCommand",
    "GetHandler",
    "SearchCommand",
    "SearchHandler",
    "DeleteCommand",
    "DeleteHandler",
    # Results
    "OperationResult",
    "ResultStatus",
]
