"""Exception classes for the snippet vault."""

from pathlib import Path


class VaultError(Exception):
    """Base exception for all vault errors."""

    pass


class SnippetValidationError(VaultError, ValueError):
    """Raised when snippet validation fails."""

    def __init__(self, field: str, message: str):
        """Initialize with field and message."""
        self.field = field
        super().__init__(f"Validation error for {field}: {message}")


class DuplicateKeyError(VaultError):
    """Raised when adding a snippet whose key is already taken."""

    def __init__(self, key: str):
        """Initialize with the colliding key."""
        self.key = key
        super().__init__(f"A snippet with key '{key}' already exists")


class StorageError(VaultError):
    """Base exception for storage-related errors."""

    def __init__(self, path: Path | str, details: str = ""):
        """Initialize with path and details."""
        self.path = str(path)
        self.details = details
        message = f"Storage error at {path}"
        if details:
            message += f": {details}"
        super().__init__(message)


class StoreCorruptError(StorageError):
    """Raised when the store file exists but cannot be parsed."""

    def __init__(self, path: Path | str, details: str = ""):
        """Initialize with path and details."""
        super().__init__(path, details)
        message = f"Snippet store is corrupt at {path}"
        if details:
            message += f": {details}"
        self.args = (message,)


class HomeDirectoryError(StorageError):
    """Raised when the user's home directory cannot be determined."""

    def __init__(self, details: str = ""):
        """Initialize with details."""
        super().__init__("~", details)
        message = "Cannot determine home directory"
        if details:
            message += f": {details}"
        self.args = (message,)


class ClipboardError(VaultError):
    """Raised when the system clipboard cannot be written."""

    def __init__(self, message: str = "Failed to copy to clipboard"):
        """Initialize with message."""
        super().__init__(message)
