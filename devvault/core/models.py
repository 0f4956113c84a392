"""Core data model for stored snippets.

A snippet is a small keyed record: the command the user wants to recall,
a human description of it, and free-form tags. The model is immutable
(frozen) so a loaded collection can be shared between operations without
defensive copies.
"""

from collections.abc import Iterable
from typing import Any

import msgspec


class Snippet(msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=True):
    """Immutable snippet record.

    ``key`` is the case-sensitive primary key chosen by the user. ``command``
    is opaque payload and is never parsed. ``tags`` keeps insertion order and
    may contain duplicates.

    All four fields are required and no others are accepted, so a hand-edited
    record with a misspelled or extra field fails to decode instead of losing
    data on the next save.
    """

    key: str
    description: str
    command: str
    tags: tuple[str, ...]

    @classmethod
    def create(
        cls,
        key: str,
        description: str,
        command: str,
        tags: Iterable[str] = (),
    ) -> "Snippet":
        """Build a snippet from loose arguments, normalizing tags to a tuple."""
        return cls(
            key=key,
            description=description,
            command=command,
            tags=tuple(tags),
        )

    def validate(self) -> list[str]:
        """Return a list of validation problems, empty when valid."""
        errors = []
        if not self.key or not self.key.strip():
            errors.append("Key cannot be empty")
        return errors

    def matches(self, keyword: str) -> bool:
        """Check whether keyword occurs in the key, description or any tag.

        Matching is a case-insensitive substring test. Each tag is compared
        on its own, never the joined tag string. An empty keyword matches
        every snippet.
        """
        needle = keyword.lower()
        if needle in self.key.lower():
            return True
        if needle in self.description.lower():
            return True
        return any(needle in tag.lower() for tag in self.tags)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain record stored on disk."""
        return {**msgspec.to_builtins(self), "tags": list(self.tags)}
