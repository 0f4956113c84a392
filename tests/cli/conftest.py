"""Pytest configuration and fixtures for CLI tests.

The CLI is run through Click's test runner with the store location patched
to a temporary file, so no test ever touches the real home directory.
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner(store_path):
    """Click CLI test runner bound to an isolated store."""

    class VaultCliRunner(CliRunner):
        def invoke(self, args, **kwargs):  # type: ignore
            """Invoke the dev-vault CLI with the store path patched."""
            from devvault.cli.main import cli

            with patch(
                "devvault.cli.main.resolve_location", return_value=store_path
            ):
                if isinstance(args, list):
                    return super().invoke(cli, args, **kwargs)
                return super().invoke(args, **kwargs)

    return VaultCliRunner()


@pytest.fixture
def mock_clipboard():
    """Replace the system clipboard with a mock."""
    with patch("devvault.cli.commands.snippet.copy_to_clipboard") as mock:
        yield mock

