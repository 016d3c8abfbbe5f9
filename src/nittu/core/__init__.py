"""Core playback and persistence layer.

Classes:
    KeyValueStorage: QSettings wrapper holding one text blob per key.
    SettingsStore: Global default appearance with load/save.
    PlaylistRepository: Position-addressed CRUD over custom playlists.
    PlaybackEngine: Slide index state machine with autoplay timer.
"""

from nittu.core.catalog import BuiltinPlaylist, resolve_slides
from nittu.core.playback import PlaybackEngine, PlaybackState, RenderedSlide
from nittu.core.playlists import MAX_PLAYLISTS, PlaylistRepository
from nittu.core.settings_store import SettingsStore
from nittu.core.storage import KeyValueStorage

__all__ = [
    "MAX_PLAYLISTS",
    "BuiltinPlaylist",
    "KeyValueStorage",
    "PlaybackEngine",
    "PlaybackState",
    "PlaylistRepository",
    "RenderedSlide",
    "SettingsStore",
    "resolve_slides",
]
