"""Settings store holding the global default playback appearance.

The store is created once at startup, loaded immediately (load-on-start)
and handed by reference to the screens and playback engines that need it.
Call flush() before the application exits.
"""

import logging
from collections.abc import Mapping
from dataclasses import replace

from PySide6.QtCore import QObject, Signal

from nittu.core.storage import KEY_USER_SETTINGS, KeyValueStorage
from nittu.errors import PersistenceError, ValidationError
from nittu.models.settings import Settings
from nittu.models.style import FontFamily

logger = logging.getLogger(__name__)


class SettingsStore(QObject):
    """Loads, saves and serves the single Settings record.

    Signals:
        settings_changed: Emitted with the new Settings after a save,
            load or reset.

    Example:
        store = SettingsStore(KeyValueStorage())
        store.load()
        store.save(Settings(delay_ms=2000))
    """

    settings_changed = Signal(object)

    def __init__(self, storage: KeyValueStorage, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._storage = storage
        self._settings = Settings()

    @property
    def settings(self) -> Settings:
        """Return the in-memory settings (built-in defaults before load)."""
        return self._settings

    def load(self) -> Settings:
        """Read the persisted settings.

        Absent or malformed storage yields the built-in defaults; the
        failure is logged and never raised.

        Returns:
            The loaded settings, which also become the in-memory settings.
        """
        try:
            data = self._storage.read_json(KEY_USER_SETTINGS)
        except PersistenceError as e:
            logger.warning("Failed to load user settings, using defaults: %s", e)
            data = None

        if data is None:
            loaded = Settings()
        elif isinstance(data, dict):
            loaded = Settings.from_dict(data)
        else:
            logger.warning(
                "Stored user settings is %s, not a record; using defaults",
                type(data).__name__,
            )
            loaded = Settings()

        self._set(loaded)
        return loaded

    def save(self, settings: Settings | Mapping[str, object]) -> None:
        """Validate and persist a full settings record.

        The record replaces the stored one wholesale and becomes the
        in-memory settings only once the write succeeded.

        Args:
            settings: A Settings instance or a mapping using the stored keys.

        Raises:
            ValidationError: If settings is not a record or a field is invalid.
            PersistenceError: If the write fails.
        """
        if isinstance(settings, Settings):
            record = settings
        elif isinstance(settings, Mapping):
            record = self._from_mapping(settings)
        else:
            msg = f"Settings must be a record, got {type(settings).__name__}"
            raise ValidationError(msg)

        record.validate()
        record = replace(record, font_family=FontFamily(record.font_family))

        self._storage.write_json(KEY_USER_SETTINGS, record.to_dict())
        logger.info("Saved user settings: %s", record)
        self._set(record)

    def reset(self) -> Settings:
        """Remove the stored record and restore the built-in defaults."""
        self._storage.remove(KEY_USER_SETTINGS)
        defaults = Settings()
        self._set(defaults)
        return defaults

    def flush(self) -> None:
        """Write pending storage changes to disk (call on exit)."""
        self._storage.sync()

    def _set(self, settings: Settings) -> None:
        self._settings = settings
        self.settings_changed.emit(settings)

    @staticmethod
    def _from_mapping(data: Mapping[str, object]) -> Settings:
        """Build Settings strictly; missing keys are an error."""
        required = ("delay", "fontSize", "fontColor", "backgroundColor", "fontFamily")
        missing = [k for k in required if k not in data]
        if missing:
            msg = f"Settings record is missing fields: {missing}"
            raise ValidationError(msg)
        return Settings(
            delay_ms=data["delay"],  # type: ignore[arg-type]
            font_size=data["fontSize"],  # type: ignore[arg-type]
            font_color=data["fontColor"],  # type: ignore[arg-type]
            background_color=data["backgroundColor"],  # type: ignore[arg-type]
            font_family=data["fontFamily"],  # type: ignore[arg-type]
        )
