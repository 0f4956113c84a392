"""Pytest configuration and fixtures."""

import os

import pytest

from devvault.core.models import Snippet
from devvault.storage.store import SnippetStore


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Isolate environment variables and the home directory for each test.

    This prevents a test from reading or writing the real store or config.
    """
    original_env = os.environ.copy()

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def sample_snippets():
    """Sample snippets for testing."""
    return [
        Snippet(
            key="gitlog",
            description="pretty git log",
            command="git log --oneline --graph",
            tags=("git", "log"),
        ),
        Snippet(
            key="dclean",
            description="Docker Cleanup",
            command="docker system prune -af",
            tags=("docker", "cleanup"),
        ),
        Snippet(
            key="ports",
            description="Show listening ports",
            command="ss -tulpn",
            tags=(),
        ),
    ]


@pytest.fixture
def store_path(tmp_path):
    """Location of an isolated store file."""
    return tmp_path / "vault" / "snippets.json"


@pytest.fixture
def store(store_path):
    """Empty store backed by a temporary file."""
    return SnippetStore(store_path)


@pytest.fixture
def populated_store(store, sample_snippets):
    """Store already holding the sample snippets."""
    store.save(sample_snippets)
    return store
