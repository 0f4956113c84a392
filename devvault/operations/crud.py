"""Query and mutation operations on an in-memory snippet collection.

These functions never touch the disk. Callers load the collection from a
store, apply one operation, and persist the result when it changed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.exceptions import DuplicateKeyError, SnippetValidationError
from ..core.models import Snippet

logger = logging.getLogger(__name__)


def add_snippet(
    snippets: list[Snippet],
    key: str,
    description: str,
    command: str,
    tags: Iterable[str] = (),
) -> Snippet:
    """Append a new snippet to the collection.

    Args:
        snippets: Collection to append to, modified in place on success
        key: Unique, case-sensitive key
        description: Human readable purpose
        command: Payload string
        tags: Zero or more labels, order preserved

    Returns:
        The snippet that was appended

    Raises:
        SnippetValidationError: If the key is empty
        DuplicateKeyError: If a snippet with the same key already exists
    """
    snippet = Snippet.create(key, description, command, tags)

    errors = snippet.validate()
    if errors:
        raise SnippetValidationError("key", errors[0])

    if any(existing.key == key for existing in snippets):
        raise DuplicateKeyError(key)

    snippets.append(snippet)
    logger.debug("Added snippet %r", key)
    return snippet


def list_snippets(snippets: list[Snippet]) -> list[Snippet]:
    """Return every snippet in insertion order."""
    return list(snippets)


def get_snippet(snippets: list[Snippet], key: str) -> Snippet | None:
    """Find the first snippet whose key equals ``key`` exactly."""
    for snippet in snippets:
        if snippet.key == key:
            return snippet
    return None


def search_snippets(snippets: list[Snippet], keyword: str) -> list[Snippet]:
    """Filter snippets by case-insensitive substring match, keeping order."""
    return [snippet for snippet in snippets if snippet.matches(keyword)]


def delete_snippets(
    snippets: list[Snippet], key: str
) -> tuple[list[Snippet], bool]:
    """Remove every snippet whose key equals ``key`` exactly.

    Returns:
        Tuple of (remaining snippets, whether anything was removed). The
        input list is left untouched.
    """
    remaining = [snippet for snippet in snippets if snippet.key != key]
    removed = len(remaining) < len(snippets)
    if removed:
        logger.debug(
            "Removed %d snippet(s) with key %r", len(snippets) - len(remaining), key
        )
    return remaining, removed
