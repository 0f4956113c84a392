"""Persistence of the snippet collection."""

from devvault.storage.store import STORE_FILENAME, SnippetStore, resolve_location

__all__ = ["STORE_FILENAME", "SnippetStore", "resolve_location"]
