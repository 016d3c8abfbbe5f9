"""Data models for slides, playlists and playback settings."""

from nittu.models.playlist import DEFAULT_PLAYLIST_DELAY_MS, MAX_SLIDES, Playlist
from nittu.models.settings import Settings
from nittu.models.slide import Slide
from nittu.models.style import COLOR_OPTIONS, ColorOption, FontFamily, SlideStyle

__all__ = [
    "COLOR_OPTIONS",
    "DEFAULT_PLAYLIST_DELAY_MS",
    "MAX_SLIDES",
    "ColorOption",
    "FontFamily",
    "Playlist",
    "Settings",
    "Slide",
    "SlideStyle",
]
