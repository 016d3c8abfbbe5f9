"""Slide model: one card of displayed text plus its style."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from nittu.errors import ValidationError
from nittu.models.style import (
    FontFamily,
    SlideStyle,
    is_hex_color,
    is_positive_int,
)

logger = logging.getLogger(__name__)

# Style used for a freshly opened "new slide" form
DRAFT_FONT_SIZE = 120
DRAFT_FONT_COLOR = "#ffffff"
DRAFT_BACKGROUND_COLOR = "#000000"
DRAFT_FONT_FAMILY = FontFamily.SYSTEM


@dataclass(frozen=True, slots=True)
class Slide:
    """A single flashcard slide.

    Style fields left as None are resolved at playback time from the
    engine defaults and then the global settings.

    Attributes:
        text: Text (or emoji) shown on the card.
        font_size: Font size in points, or None.
        font_color: Hex text color, or None.
        background_color: Hex background color, or None.
        font_family: Font family, or None.
    """

    text: str
    font_size: int | None = None
    font_color: str | None = None
    background_color: str | None = None
    font_family: FontFamily | None = None

    def __post_init__(self) -> None:
        """Validate style fields and normalize the font family."""
        if not isinstance(self.text, str):
            msg = f"Slide text must be a string, got {type(self.text).__name__}"
            raise ValidationError(msg)
        if self.font_size is not None and not is_positive_int(self.font_size):
            msg = f"Font size must be a positive integer, got {self.font_size!r}"
            raise ValidationError(msg)
        for label, color in (("font", self.font_color), ("background", self.background_color)):
            if color is not None and not is_hex_color(color):
                msg = f"Invalid {label} color: {color!r}"
                raise ValidationError(msg)
        if self.font_family is not None and not isinstance(self.font_family, FontFamily):
            try:
                family = FontFamily(self.font_family)
            except ValueError:
                msg = f"Unknown font family: {self.font_family!r}"
                raise ValidationError(msg) from None
            object.__setattr__(self, "font_family", family)

    @classmethod
    def draft(cls, text: str = "") -> "Slide":
        """Return a slide carrying the editor's default style."""
        return cls(
            text=text,
            font_size=DRAFT_FONT_SIZE,
            font_color=DRAFT_FONT_COLOR,
            background_color=DRAFT_BACKGROUND_COLOR,
            font_family=DRAFT_FONT_FAMILY,
        )

    @property
    def has_text(self) -> bool:
        """Return True if the slide has non-blank text."""
        return bool(self.text.strip())

    @property
    def style(self) -> SlideStyle:
        """Return the slide's own style fields."""
        return SlideStyle(
            font_size=self.font_size,
            font_color=self.font_color,
            background_color=self.background_color,
            font_family=self.font_family,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict, omitting unset fields."""
        result: dict[str, Any] = {"text": self.text}
        if self.font_size is not None:
            result["fontSize"] = self.font_size
        if self.font_color is not None:
            result["fontColor"] = self.font_color
        if self.background_color is not None:
            result["backgroundColor"] = self.background_color
        if self.font_family is not None:
            result["fontFamily"] = str(self.font_family)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Slide":
        """Build a slide from a stored record.

        Invalid style values are dropped (treated as unset) rather than
        rejected, so one bad field does not lose the whole slide.
        """
        text = data.get("text", "")
        font_size = data.get("fontSize")
        font_color = data.get("fontColor")
        background_color = data.get("backgroundColor")
        font_family = data.get("fontFamily")

        if font_size is not None and not is_positive_int(font_size):
            logger.warning("Ignoring invalid slide font size: %r", font_size)
            font_size = None
        if font_color is not None and not is_hex_color(font_color):
            logger.warning("Ignoring invalid slide font color: %r", font_color)
            font_color = None
        if background_color is not None and not is_hex_color(background_color):
            logger.warning("Ignoring invalid slide background color: %r", background_color)
            background_color = None
        family = None
        if font_family is not None:
            try:
                family = FontFamily(str(font_family))
            except ValueError:
                logger.warning("Ignoring unknown slide font family: %r", font_family)

        return cls(
            text=text if isinstance(text, str) else str(text),
            font_size=font_size,
            font_color=font_color,
            background_color=background_color,
            font_family=family,
        )
