"""dev-vault CLI.

Command-line interface for the snippet store, built with Click and Rich.
"""

from devvault.cli.main import cli, main

__all__ = ["cli", "main"]
