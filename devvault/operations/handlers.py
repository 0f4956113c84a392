"""Command handlers that run one operation against the snippet store.

Each handler performs the full per-invocation cycle: load the collection,
apply a pure operation from ``crud``, and write the collection back only
when it actually changed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from devvault.core.exceptions import (
    DuplicateKeyError,
    SnippetValidationError,
    StorageError,
)
from devvault.storage.store import SnippetStore

from .crud import (
    add_snippet,
    delete_snippets,
    get_snippet,
    list_snippets,
    search_snippets,
)
from .results import OperationResult, ResultStatus

logger = logging.getLogger(__name__)


@dataclass
class AddCommand:
    """Command to add a new snippet."""

    key: str
    description: str
    command: str
    tags: list[str] = field(default_factory=list)
    dry_run: bool = False


@dataclass
class GetCommand:
    """Command to look up a snippet by key."""

    key: str


@dataclass
class SearchCommand:
    """Command to search snippets by keyword."""

    keyword: str


@dataclass
class DeleteCommand:
    """Command to delete a snippet by key."""

    key: str
    dry_run: bool = False


def _storage_failure(error: StorageError, message: str, key: str | None = None):
    logger.debug("Storage failure: %s", error)
    return OperationResult(
        status=ResultStatus.ERROR,
        key=key,
        message=message,
        errors=[str(error)],
    )


class AddHandler:
    """Handles snippet creation with the duplicate-key check."""

    def __init__(self, store: SnippetStore):
        self.store = store

    def execute(self, command: AddCommand) -> OperationResult:
        """Execute add command."""
        try:
            snippets = self.store.load()
        except StorageError as e:
            return _storage_failure(e, "Failed to load snippets", command.key)

        try:
            snippet = add_snippet(
                snippets,
                command.key,
                command.description,
                command.command,
                command.tags,
            )
        except SnippetValidationError as e:
            return OperationResult(
                status=ResultStatus.VALIDATION_FAILED,
                key=command.key,
                message="Snippet validation failed",
                errors=[str(e)],
            )
        except DuplicateKeyError as e:
            return OperationResult(
                status=ResultStatus.CONFLICT,
                key=e.key,
                message=f"A snippet with key '{e.key}' already exists",
            )

        if command.dry_run:
            return OperationResult(
                status=ResultStatus.DRY_RUN,
                key=snippet.key,
                message="Snippet would be added",
                snippets=[snippet],
            )

        try:
            self.store.save(snippets)
        except StorageError as e:
            return _storage_failure(e, "Failed to save snippets", command.key)

        return OperationResult(
            status=ResultStatus.SUCCESS,
            key=snippet.key,
            message=f"Added snippet: {snippet.key}",
            snippets=[snippet],
        )


class ListHandler:
    """Handles listing every snippet."""

    def __init__(self, store: SnippetStore):
        self.store = store

    def execute(self) -> OperationResult:
        """Execute list command."""
        try:
            snippets = self.store.load()
        except StorageError as e:
            return _storage_failure(e, "Failed to load snippets")

        found = list_snippets(snippets)
        return OperationResult(
            status=ResultStatus.SUCCESS,
            message=f"{len(found)} snippet(s)",
            snippets=found,
        )


class GetHandler:
    """Handles lookup of a single snippet."""

    def __init__(self, store: SnippetStore):
        self.store = store

    def execute(self, command: GetCommand) -> OperationResult:
        """Execute get command."""
        try:
            snippets = self.store.load()
        except StorageError as e:
            return _storage_failure(e, "Failed to load snippets", command.key)

        snippet = get_snippet(snippets, command.key)
        if snippet is None:
            return OperationResult(
                status=ResultStatus.NOT_FOUND,
                key=command.key,
                message=f"No snippet found with key: '{command.key}'",
            )

        return OperationResult(
            status=ResultStatus.SUCCESS,
            key=snippet.key,
            message=f"Found: '{snippet.description}'",
            snippets=[snippet],
        )


class SearchHandler:
    """Handles keyword search."""

    def __init__(self, store: SnippetStore):
        self.store = store

    def execute(self, command: SearchCommand) -> OperationResult:
        """Execute search command."""
        try:
            snippets = self.store.load()
        except StorageError as e:
            return _storage_failure(e, "Failed to load snippets")

        matches = search_snippets(snippets, command.keyword)
        if not matches:
            return OperationResult(
                status=ResultStatus.NOT_FOUND,
                message=f"No matches found for '{command.keyword}'",
            )

        return OperationResult(
            status=ResultStatus.SUCCESS,
            message=f"Found {len(matches)} matches",
            snippets=matches,
        )


class DeleteHandler:
    """Handles snippet deletion."""

    def __init__(self, store: SnippetStore):
        self.store = store

    def execute(self, command: DeleteCommand) -> OperationResult:
        """Execute delete command."""
        try:
            snippets = self.store.load()
        except StorageError as e:
            return _storage_failure(e, "Failed to load snippets", command.key)

        removed_snippets = [s for s in snippets if s.key == command.key]
        remaining, removed = delete_snippets(snippets, command.key)

        if not removed:
            return OperationResult(
                status=ResultStatus.NOT_FOUND,
                key=command.key,
                message=f"Snippet not found: {command.key}",
            )

        if command.dry_run:
            return OperationResult(
                status=ResultStatus.DRY_RUN,
                key=command.key,
                message=f"Snippet would be deleted: {command.key}",
                snippets=removed_snippets,
            )

        try:
            self.store.save(remaining)
        except StorageError as e:
            return _storage_failure(e, "Failed to save snippets", command.key)

        return OperationResult(
            status=ResultStatus.SUCCESS,
            key=command.key,
            message=f"Deleted snippet: {command.key}",
            snippets=removed_snippets,
        )
