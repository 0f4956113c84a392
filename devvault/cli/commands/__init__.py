"""CLI commands module."""

from . import snippet

__all__ = ["snippet"]
