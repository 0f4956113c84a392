"""Core domain models and exceptions for snippet management."""

from devvault.core.exceptions import (
    ClipboardError,
    DuplicateKeyError,
    HomeDirectoryError,
    SnippetValidationError,
    StorageError,
    StoreCorruptError,
    VaultError,
)
from devvault.core.models import Snippet

__all__ = [
    "Snippet",
    "VaultError",
    "SnippetValidationError",
    "DuplicateKeyError",
    "StorageError",
    "StoreCorruptError",
    "HomeDirectoryError",
    "ClipboardError",
]
