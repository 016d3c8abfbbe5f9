"""Settings model: the global default playback appearance."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from nittu.errors import ValidationError
from nittu.models.style import (
    FontFamily,
    coerce_color,
    coerce_font_family,
    coerce_positive_int,
    is_hex_color,
    is_positive_int,
)

DEFAULT_DELAY_MS = 1500
DEFAULT_FONT_SIZE = 160
DEFAULT_FONT_COLOR = "#ffffff"
DEFAULT_BACKGROUND_COLOR = "#000000"
DEFAULT_FONT_FAMILY = FontFamily.SYSTEM


@dataclass(frozen=True, slots=True)
class Settings:
    """Default appearance applied when a slide or playlist omits a field.

    Attributes:
        delay_ms: Autoplay delay in milliseconds.
        font_size: Font size in points.
        font_color: Hex text color.
        background_color: Hex background color.
        font_family: Font family.
    """

    delay_ms: int = DEFAULT_DELAY_MS
    font_size: int = DEFAULT_FONT_SIZE
    font_color: str = DEFAULT_FONT_COLOR
    background_color: str = DEFAULT_BACKGROUND_COLOR
    font_family: FontFamily = DEFAULT_FONT_FAMILY

    def validate(self) -> None:
        """Check every field.

        Raises:
            ValidationError: If any field is out of range or malformed.
        """
        if isinstance(self.delay_ms, bool) or not isinstance(self.delay_ms, int):
            msg = f"Delay must be an integer, got {self.delay_ms!r}"
            raise ValidationError(msg)
        if self.delay_ms < 0:
            msg = f"Delay must not be negative, got {self.delay_ms}"
            raise ValidationError(msg)
        if not is_positive_int(self.font_size):
            msg = f"Font size must be a positive integer, got {self.font_size!r}"
            raise ValidationError(msg)
        if not is_hex_color(self.font_color):
            msg = f"Invalid font color: {self.font_color!r}"
            raise ValidationError(msg)
        if not is_hex_color(self.background_color):
            msg = f"Invalid background color: {self.background_color!r}"
            raise ValidationError(msg)
        try:
            FontFamily(self.font_family)
        except ValueError:
            msg = f"Unknown font family: {self.font_family!r}"
            raise ValidationError(msg) from None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "delay": self.delay_ms,
            "fontSize": self.font_size,
            "fontColor": self.font_color,
            "backgroundColor": self.background_color,
            "fontFamily": str(self.font_family),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        """Build settings from a stored record, defaulting invalid fields."""
        raw_delay = data.get("delay", DEFAULT_DELAY_MS)
        if isinstance(raw_delay, int) and not isinstance(raw_delay, bool) and raw_delay >= 0:
            delay = raw_delay
        else:
            delay = DEFAULT_DELAY_MS
        return cls(
            delay_ms=delay,
            font_size=coerce_positive_int(data.get("fontSize"), DEFAULT_FONT_SIZE),
            font_color=coerce_color(data.get("fontColor"), DEFAULT_FONT_COLOR),
            background_color=coerce_color(data.get("backgroundColor"), DEFAULT_BACKGROUND_COLOR),
            font_family=coerce_font_family(data.get("fontFamily"), DEFAULT_FONT_FAMILY),
        )
