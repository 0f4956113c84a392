"""Single-file JSON store for the snippet collection.

The whole collection lives in one JSON array under the user's home
directory. Every invocation loads the full collection, and every mutation
rewrites the full file through a temp file and an atomic rename.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import msgspec

from devvault.core.exceptions import HomeDirectoryError, StorageError, StoreCorruptError
from devvault.core.models import Snippet

logger = logging.getLogger(__name__)

STORE_FILENAME = ".dev-vault.json"

_decoder = msgspec.json.Decoder(list[Snippet])
_encoder = msgspec.json.Encoder()


def resolve_location() -> Path:
    """Get the fixed path of the snippet store for the current user."""
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise HomeDirectoryError(str(e)) from e
    return home / STORE_FILENAME


class SnippetStore:
    """Maps the in-memory collection to a single flat JSON file."""

    def __init__(self, path: Path | str | None = None):
        """Initialize the store.

        Args:
            path: Store file location, defaults to ``resolve_location()``
        """
        self.path = Path(path) if path is not None else resolve_location()

    def exists(self) -> bool:
        """Check whether the backing file exists."""
        return self.path.exists()

    def load(self) -> list[Snippet]:
        """Load the full collection.

        A missing or blank file is an empty collection. A file that exists
        but does not hold a JSON array of snippet records raises
        ``StoreCorruptError`` instead of being treated as empty.
        """
        if not self.exists():
            logger.debug("No store at %s, starting empty", self.path)
            return []

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StorageError(self.path, e.strerror or str(e)) from e

        if not raw.strip():
            logger.debug("Store at %s is blank, starting empty", self.path)
            return []

        try:
            snippets = _decoder.decode(raw)
        except msgspec.DecodeError as e:
            raise StoreCorruptError(self.path, str(e)) from e

        logger.debug("Loaded %d snippets from %s", len(snippets), self.path)
        return snippets

    def save(self, snippets: list[Snippet]) -> None:
        """Replace the backing file with the given collection atomically."""
        data = self.encode(snippets)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f"{self.path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise StorageError(self.path, e.strerror or str(e)) from e

        try:
            with open(temp_fd, "wb") as f:
                f.write(data)
            Path(temp_path).replace(self.path)
        except OSError as e:
            Path(temp_path).unlink(missing_ok=True)
            raise StorageError(self.path, e.strerror or str(e)) from e

        logger.debug("Saved %d snippets to %s", len(snippets), self.path)

    @staticmethod
    def encode(snippets: list[Snippet]) -> bytes:
        """Serialize a collection to the stable on-disk form."""
        return msgspec.json.format(_encoder.encode(snippets), indent=2) + b"\n"
