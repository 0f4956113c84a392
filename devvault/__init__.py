"""dev-vault: a developer's command-line snippet manager."""

__version__ = "0.1.0"
