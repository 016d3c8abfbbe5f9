"""Tests for KeyValueStorage using QSettings."""

from pathlib import Path
from unittest.mock import patch

import pytest

from nittu.core.storage import KEY_CUSTOM_PLAYLISTS, KEY_USER_SETTINGS, KeyValueStorage
from nittu.errors import PersistenceError


class TestKeyValueStorage:
    """Test text and JSON access."""

    def test_initially_empty(self, storage: KeyValueStorage) -> None:
        """Test that absent keys read as None."""
        assert storage.read_text(KEY_USER_SETTINGS) is None
        assert storage.read_json(KEY_CUSTOM_PLAYLISTS) is None
        assert not storage.contains(KEY_USER_SETTINGS)

    def test_write_and_read_text(self, storage: KeyValueStorage) -> None:
        """Test storing plain text."""
        storage.write_text("greeting", "hello, world; a=b")
        assert storage.read_text("greeting") == "hello, world; a=b"
        assert storage.contains("greeting")

    def test_write_and_read_json(self, storage: KeyValueStorage) -> None:
        """Test storing structured values, emoji included."""
        value = [{"name": "Pets", "slides": ["🐱", "🐶"], "delay": 3000}]
        storage.write_json(KEY_CUSTOM_PLAYLISTS, value)
        assert storage.read_json(KEY_CUSTOM_PLAYLISTS) == value

    def test_malformed_json_raises(self, storage: KeyValueStorage) -> None:
        """Test that unparsable text raises PersistenceError."""
        storage.write_text(KEY_USER_SETTINGS, "{not json")
        with pytest.raises(PersistenceError, match="Malformed JSON"):
            storage.read_json(KEY_USER_SETTINGS)

    def test_blank_text_reads_as_none(self, storage: KeyValueStorage) -> None:
        """Test that an empty blob counts as nothing stored."""
        storage.write_text(KEY_USER_SETTINGS, "")
        assert storage.read_json(KEY_USER_SETTINGS) is None

    def test_unserializable_value_raises(self, storage: KeyValueStorage) -> None:
        """Test that values json cannot encode are rejected."""
        with pytest.raises(PersistenceError, match="Cannot serialize"):
            storage.write_json(KEY_USER_SETTINGS, {"when": object()})

    def test_remove(self, storage: KeyValueStorage) -> None:
        """Test removing a key."""
        storage.write_text(KEY_USER_SETTINGS, "{}")
        storage.remove(KEY_USER_SETTINGS)
        assert storage.read_text(KEY_USER_SETTINGS) is None

    def test_clear(self, storage: KeyValueStorage) -> None:
        """Test clearing every key."""
        storage.write_text("a", "1")
        storage.write_text("b", "2")
        storage.clear()
        assert not storage.contains("a")
        assert not storage.contains("b")


class TestKeyValueStoragePersistence:
    """Test that values persist across instances."""

    def test_persists_across_instances(self, tmp_path: Path) -> None:
        """Test that a new instance on the same file sees the data."""
        path = tmp_path / "shared.ini"
        KeyValueStorage(path=path).write_json(KEY_USER_SETTINGS, {"delay": 900})

        assert KeyValueStorage(path=path).read_json(KEY_USER_SETTINGS) == {"delay": 900}


class TestKeyValueStorageWriteFailure:
    """Test that failed flushes do not leak into later reads."""

    def test_failed_write_leaves_key_absent(self, unwritable_storage: KeyValueStorage) -> None:
        """Test that a value that never reached disk is not read back."""
        with pytest.raises(PersistenceError, match="sync failed"):
            unwritable_storage.write_json(KEY_USER_SETTINGS, {"delay": 9999})
        assert unwritable_storage.read_text(KEY_USER_SETTINGS) is None
        assert not unwritable_storage.contains(KEY_USER_SETTINGS)

    def test_failed_write_restores_previous_value(self, storage: KeyValueStorage) -> None:
        """Test that the last persisted value survives a failed overwrite."""
        storage.write_text(KEY_USER_SETTINGS, '{"delay": 900}')
        with (
            patch.object(storage, "sync", side_effect=PersistenceError("sync failed")),
            pytest.raises(PersistenceError),
        ):
            storage.write_text(KEY_USER_SETTINGS, '{"delay": 9999}')
        assert storage.read_json(KEY_USER_SETTINGS) == {"delay": 900}

    def test_failed_remove_restores_value(self, storage: KeyValueStorage) -> None:
        """Test that a failed remove keeps the value readable."""
        storage.write_text(KEY_USER_SETTINGS, "{}")
        with (
            patch.object(storage, "sync", side_effect=PersistenceError("sync failed")),
            pytest.raises(PersistenceError),
        ):
            storage.remove(KEY_USER_SETTINGS)
        assert storage.read_text(KEY_USER_SETTINGS) == "{}"
