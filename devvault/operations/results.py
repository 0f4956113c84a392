"""Result types for snippet operations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from devvault.core.models import Snippet


class ResultStatus(Enum):
    """Status of an operation result."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION_FAILED = "validation_failed"
    DRY_RUN = "dry_run"
    ERROR = "error"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self in [self.SUCCESS, self.DRY_RUN]

    def is_failure(self) -> bool:
        """Check if status indicates a failure the user must act on.

        A miss is a normal negative answer, not a failure.
        """
        return self in [self.CONFLICT, self.VALIDATION_FAILED, self.ERROR]


@dataclass
class OperationResult:
    """Result of a single snippet operation."""

    status: ResultStatus
    message: str
    key: str | None = None
    snippets: list[Snippet] = field(default_factory=list)
    errors: list[str] | None = None

    @property
    def success(self) -> bool:
        """Check if the operation succeeded."""
        return self.status.is_success()

    @property
    def snippet(self) -> Snippet | None:
        """First snippet carried by the result, if any."""
        return self.snippets[0] if self.snippets else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        result: dict[str, Any] = {
            "status": self.status.value,
            "message": self.message,
            "key": self.key,
            "snippets": [snippet.to_dict() for snippet in self.snippets],
        }

        if self.errors:
            result["errors"] = self.errors

        return result
