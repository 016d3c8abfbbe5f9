"""Test fixtures for nittu tests."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from nittu.core.playlists import PlaylistRepository
from nittu.core.settings_store import SettingsStore
from nittu.core.storage import KeyValueStorage
from nittu.models.playlist import Playlist
from nittu.models.slide import Slide

# Run Qt headless so the suite works without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def storage(tmp_path: Path) -> KeyValueStorage:
    """Return storage backed by a fresh INI file for each test."""
    return KeyValueStorage(path=tmp_path / "nittu.ini")


@pytest.fixture
def unwritable_storage(tmp_path: Path) -> KeyValueStorage:
    """Return storage whose INI file can never be written.

    The parent of the INI path is a regular file, so every sync fails.
    """
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    return KeyValueStorage(path=blocker / "nittu.ini")


@pytest.fixture
def settings_store(storage: KeyValueStorage) -> SettingsStore:
    """Return a SettingsStore on the test storage."""
    return SettingsStore(storage)


@pytest.fixture
def repo(storage: KeyValueStorage) -> PlaylistRepository:
    """Return a PlaylistRepository on the test storage."""
    return PlaylistRepository(storage)


def _make_playlist(name: str = "Colors", count: int = 3, delay_ms: int = 2000) -> Playlist:
    slides = tuple(Slide.draft(f"{name} {i}") for i in range(count))
    return Playlist(name=name, slides=slides, delay_ms=delay_ms)


@pytest.fixture
def make_playlist() -> Callable[..., Playlist]:
    """Return a factory building a playlist with ``count`` drafted slides."""
    return _make_playlist


@pytest.fixture
def sample_playlist() -> Playlist:
    """Return a small styled playlist."""
    return Playlist(
        name="Colors",
        slides=(
            Slide.draft("Red"),
            Slide(text="Blue", font_size=90, font_color="#0000ff", background_color="#ffffff"),
            Slide(text="Green", font_family="Georgia"),
        ),
        delay_ms=2500,
    )
