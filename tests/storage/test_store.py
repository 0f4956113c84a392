"""Tests for the single-file snippet store.

This module tests location resolution, loading of missing, blank, valid
and corrupt files, and the atomic whole-file save.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from devvault.core.exceptions import HomeDirectoryError, StorageError, StoreCorruptError
from devvault.core.models import Snippet
from devvault.storage.store import STORE_FILENAME, SnippetStore, resolve_location


class TestResolveLocation:
    """Test resolve_location()."""

    def test_fixed_file_under_home(self):
        """The store lives at a fixed name in the home directory."""
        assert resolve_location() == Path.home() / STORE_FILENAME

    def test_is_deterministic(self):
        """Repeated calls give the same path."""
        assert resolve_location() == resolve_location()

    def test_ignores_working_directory(self, tmp_path, monkeypatch):
        """The path does not depend on the current directory."""
        before = resolve_location()
        monkeypatch.chdir(tmp_path)

        assert resolve_location() == before

    def test_missing_home_raises(self):
        """An undiscoverable home directory is a fatal storage error."""
        with patch(
            "devvault.storage.store.Path.home",
            side_effect=RuntimeError("Could not determine home directory."),
        ):
            with pytest.raises(HomeDirectoryError) as exc_info:
                resolve_location()

        assert isinstance(exc_info.value, StorageError)
        assert "home directory" in str(exc_info.value)

    def test_default_store_path(self):
        """A store without an explicit path uses the resolved location."""
        assert SnippetStore().path == resolve_location()


class TestLoad:
    """Test SnippetStore.load()."""

    def test_missing_file_is_empty(self, store):
        """First run starts with an empty collection."""
        assert not store.exists()
        assert store.load() == []

    @pytest.mark.parametrize("content", ["", "  \n"])
    def test_blank_file_is_empty(self, store, content):
        """A blank file holds no snippets."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text(content)

        assert store.load() == []

    def test_empty_array(self, store):
        """An empty JSON array is an empty collection."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("[]")

        assert store.load() == []

    def test_reads_records(self, store):
        """Records are decoded in file order."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text(
            json.dumps(
                [
                    {"key": "b", "description": "B", "command": "cb", "tags": ["x"]},
                    {"key": "a", "description": "A", "command": "ca", "tags": []},
                ]
            )
        )

        assert store.load() == [
            Snippet.create("b", "B", "cb", ["x"]),
            Snippet.create("a", "A", "ca"),
        ]

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            '{"key": "a"}',
            "[1, 2]",
            '[{"key": "a", "description": "d"}]',
            '[{"key": "a", "description": "d", "command": 5, "tags": []}]',
            '[{"key": "a", "description": "d", "command": "c"}]',
            '[{"key": "a", "description": "d", "command": "c", "Tags": ["x"]}]',
            '[{"key": "a", "description": "d", "command": "c", "tags": [], "note": "x"}]',
        ],
    )
    def test_corrupt_file_raises(self, store, content):
        """Unparseable content is fatal, never silently emptied."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text(content)

        with pytest.raises(StoreCorruptError) as exc_info:
            store.load()

        assert exc_info.value.path == str(store.path)
        assert str(store.path) in str(exc_info.value)
        assert store.path.read_text() == content

    def test_unreadable_path_raises_storage_error(self, store):
        """Read failures are reported with the path."""
        store.path.mkdir(parents=True)

        with pytest.raises(StorageError) as exc_info:
            store.load()

        assert not isinstance(exc_info.value, StoreCorruptError)
        assert exc_info.value.path == str(store.path)


class TestSave:
    """Test SnippetStore.save()."""

    def test_roundtrip(self, store, sample_snippets):
        """load(save(C)) == C."""
        store.save(sample_snippets)

        assert store.load() == sample_snippets

    def test_roundtrip_preserves_tricky_content(self, store):
        """Quotes, unicode and duplicate tags survive."""
        snippets = [
            Snippet.create("q", 'say "hi"', "echo '$HOME' && printf '%s\\n' ü", ["t", "t"]),
            Snippet.create("e", "", "", []),
        ]

        store.save(snippets)

        assert store.load() == snippets

    def test_creates_parent_directory(self, store):
        """The parent directory is created when missing."""
        assert not store.path.parent.exists()

        store.save([])

        assert store.path.exists()

    def test_output_is_stable(self, store, sample_snippets):
        """Saving the same collection twice yields the same bytes."""
        store.save(sample_snippets)
        first = store.path.read_bytes()
        store.save(store.load())

        assert store.path.read_bytes() == first

    def test_file_layout(self, store, sample_snippets):
        """The file is a JSON array of four-field records."""
        store.save(sample_snippets[:1])

        data = json.loads(store.path.read_text())
        assert data == [
            {
                "key": "gitlog",
                "description": "pretty git log",
                "command": "git log --oneline --graph",
                "tags": ["git", "log"],
            }
        ]
        assert store.path.read_text().endswith("\n")

    def test_overwrites_whole_file(self, populated_store):
        """A save replaces the previous content entirely."""
        populated_store.save([Snippet.create("only", "", "")])

        assert [s.key for s in populated_store.load()] == ["only"]

    def test_leaves_no_temp_files(self, populated_store):
        """Only the store file remains in its directory."""
        assert list(populated_store.path.parent.iterdir()) == [populated_store.path]

    def test_failed_replace_keeps_original(self, populated_store, sample_snippets):
        """A crash during replace leaves the old file intact and cleans up."""
        before = populated_store.path.read_bytes()

        with patch.object(Path, "replace", side_effect=OSError(28, "No space left on device")):
            with pytest.raises(StorageError) as exc_info:
                populated_store.save([])

        assert "No space left on device" in str(exc_info.value)
        assert populated_store.path.read_bytes() == before
        assert list(populated_store.path.parent.iterdir()) == [populated_store.path]

    def test_unwritable_directory_raises(self, tmp_path):
        """Failure to create the temp file is a storage error."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = SnippetStore(blocker / "snippets.json")

        with pytest.raises(StorageError):
            store.save([])

    def test_encode_empty(self):
        """An empty collection encodes as an empty array."""
        assert SnippetStore.encode([]) == b"[]\n"
