"""Key-value text storage backed by QSettings."""

import json
import logging
from pathlib import Path
from typing import Any

from PySide6.QtCore import QSettings

from nittu.errors import PersistenceError

logger = logging.getLogger(__name__)

# Storage keys
KEY_CUSTOM_PLAYLISTS = "customPlaylists"
KEY_USER_SETTINGS = "userSettings"


class KeyValueStorage:
    """Wrapper around QSettings holding one text blob per key.

    QSettings stores values in platform-specific locations:
    - Windows: HKEY_CURRENT_USER\\Software\\Nittu\\Nittu
    - macOS: ~/Library/Preferences/com.Nittu.Nittu.plist
    - Linux: ~/.config/Nittu/Nittu.conf

    Passing ``path`` stores everything in that INI file instead.

    Each write replaces the whole value under its key and is synced
    immediately, so a key holds either the previous or the new blob.

    Example:
        storage = KeyValueStorage()
        storage.write_json("userSettings", {"delay": 1500})
        data = storage.read_json("userSettings")
    """

    def __init__(
        self,
        organization: str = "Nittu",
        application: str = "Nittu",
        path: str | Path | None = None,
    ) -> None:
        """Initialize the storage.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
            path: Optional INI file path overriding the native location.
        """
        if path is not None:
            self._settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    def contains(self, key: str) -> bool:
        """Return True if a value is stored under key."""
        return bool(self._settings.contains(key))

    def read_text(self, key: str) -> str | None:
        """Read the text stored under key.

        Args:
            key: Storage key.

        Returns:
            The stored text, or None if nothing is stored.

        Raises:
            PersistenceError: If the stored value is not text.
        """
        value = self._settings.value(key, None)
        if value is None:
            return None
        if not isinstance(value, str):
            msg = f"Value under '{key}' is {type(value).__name__}, expected text"
            raise PersistenceError(msg)
        return value

    def read_json(self, key: str) -> Any:
        """Read and parse the JSON text stored under key.

        Args:
            key: Storage key.

        Returns:
            The decoded value, or None if nothing is stored.

        Raises:
            PersistenceError: If the stored value is not valid JSON text.
        """
        raw = self.read_text(key)
        if raw is None or not raw.strip():
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            msg = f"Malformed JSON under '{key}': {e}"
            raise PersistenceError(msg) from e

    def write_text(self, key: str, text: str) -> None:
        """Store text under key and flush it to disk.

        Args:
            key: Storage key.
            text: Text to store.

        On a failed flush the previous value (or its absence) is put back,
        so later reads keep returning what was last persisted.

        Raises:
            PersistenceError: If the backing store reports an error.
        """
        had_previous = self._settings.contains(key)
        previous = self._settings.value(key) if had_previous else None
        self._settings.setValue(key, text)
        try:
            self.sync()
        except PersistenceError:
            if had_previous:
                self._settings.setValue(key, previous)
            else:
                self._settings.remove(key)
            logger.warning("Write to '%s' failed, previous value restored", key)
            raise

    def write_json(self, key: str, value: Any) -> None:
        """Serialize value as JSON and store it under key.

        Raises:
            PersistenceError: If value cannot be serialized or written.
        """
        try:
            text = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            msg = f"Cannot serialize value for '{key}': {e}"
            raise PersistenceError(msg) from e
        self.write_text(key, text)

    def remove(self, key: str) -> None:
        """Remove the value stored under key.

        Raises:
            PersistenceError: If the backing store reports an error. The
                value is put back in that case.
        """
        had_previous = self._settings.contains(key)
        previous = self._settings.value(key) if had_previous else None
        self._settings.remove(key)
        try:
            self.sync()
        except PersistenceError:
            if had_previous:
                self._settings.setValue(key, previous)
            raise

    def clear(self) -> None:
        """Clear all stored values (useful for testing or reset)."""
        self._settings.clear()
        self.sync()

    def sync(self) -> None:
        """Force values to be written to disk.

        Raises:
            PersistenceError: If the backing store reports an error.
        """
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            msg = f"Storage sync failed: {status}"
            raise PersistenceError(msg)
        logger.debug("Storage synced to %s", self._settings.fileName())
