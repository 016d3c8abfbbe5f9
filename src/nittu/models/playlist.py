"""Playlist model: a named, ordered, bounded run of slides plus timing."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from nittu.errors import ValidationError
from nittu.models.slide import Slide

logger = logging.getLogger(__name__)

MAX_SLIDES = 30
DEFAULT_PLAYLIST_DELAY_MS = 3000


@dataclass(frozen=True, slots=True)
class Playlist:
    """A user-defined playlist.

    Playlists have no stable id; the repository addresses them by position.

    Attributes:
        name: Display name (must be non-blank before it is saved).
        slides: Ordered slides, at most MAX_SLIDES.
        delay_ms: Autoplay delay in milliseconds.
    """

    name: str = ""
    slides: tuple[Slide, ...] = field(default_factory=tuple)
    delay_ms: int = DEFAULT_PLAYLIST_DELAY_MS

    def __post_init__(self) -> None:
        """Freeze the slide sequence and check the delay."""
        if not isinstance(self.slides, tuple):
            object.__setattr__(self, "slides", tuple(self.slides))
        if isinstance(self.delay_ms, bool) or not isinstance(self.delay_ms, int):
            msg = f"Delay must be an integer, got {self.delay_ms!r}"
            raise ValidationError(msg)
        if self.delay_ms < 0:
            msg = f"Delay must not be negative, got {self.delay_ms}"
            raise ValidationError(msg)

    @property
    def slide_count(self) -> int:
        """Return the number of slides."""
        return len(self.slides)

    @property
    def is_full(self) -> bool:
        """Return True if no more slides can be added."""
        return len(self.slides) >= MAX_SLIDES

    @property
    def has_name(self) -> bool:
        """Return True if the name is non-blank."""
        return bool(self.name.strip())

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "name": self.name,
            "slides": [s.to_dict() for s in self.slides],
            "delay": self.delay_ms,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Playlist":
        """Build a playlist from a stored record.

        Slides that are bare strings become unstyled slides; entries that are
        neither strings nor records are skipped. A missing, zero or invalid
        delay falls back to DEFAULT_PLAYLIST_DELAY_MS.
        """
        name = data.get("name", "")
        raw_slides = data.get("slides", [])
        raw_delay = data.get("delay")

        slides: list[Slide] = []
        if isinstance(raw_slides, list):
            for raw in raw_slides:
                if isinstance(raw, str):
                    slides.append(Slide(text=raw))
                elif isinstance(raw, Mapping):
                    slides.append(Slide.from_dict(raw))
                else:
                    logger.warning("Skipping invalid slide entry: %r", raw)
        else:
            logger.warning("Playlist %r has non-list slides, ignoring", name)

        if isinstance(raw_delay, int) and not isinstance(raw_delay, bool) and raw_delay > 0:
            delay = raw_delay
        else:
            delay = DEFAULT_PLAYLIST_DELAY_MS

        if len(slides) > MAX_SLIDES:
            logger.warning(
                "Playlist %r has %d slides, keeping the first %d", name, len(slides), MAX_SLIDES
            )

        return cls(
            name=name if isinstance(name, str) else str(name),
            slides=tuple(slides[:MAX_SLIDES]),
            delay_ms=delay,
        )
