"""Font, color and style primitives shared by slides, settings and playback."""

import logging
import re
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class FontFamily(StrEnum):
    """Font families offered in the slide editor and settings."""

    SYSTEM = "System"
    COURIER = "Courier"
    GEORGIA = "Georgia"
    TIMES_NEW_ROMAN = "Times New Roman"
    VERDANA = "Verdana"


@dataclass(frozen=True, slots=True)
class ColorOption:
    """A named swatch in the color pickers.

    Attributes:
        name: Label shown to the user.
        value: Hex color string.
    """

    name: str
    value: str


COLOR_OPTIONS: tuple[ColorOption, ...] = (
    ColorOption("Black", "#000000"),
    ColorOption("White", "#ffffff"),
    ColorOption("Red", "#ff0000"),
    ColorOption("Green", "#00ff00"),
    ColorOption("Blue", "#0000ff"),
    ColorOption("Yellow", "#ffff00"),
    ColorOption("Orange", "#ffa500"),
    ColorOption("Purple", "#800080"),
    ColorOption("Pink", "#ffc0cb"),
    ColorOption("Gray", "#808080"),
)


def is_hex_color(value: object) -> bool:
    """Return True if value is a #rgb or #rrggbb string."""
    return isinstance(value, str) and _HEX_COLOR_RE.match(value) is not None


def is_positive_int(value: object) -> bool:
    """Return True for ints above zero (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def coerce_positive_int(value: object, default: int) -> int:
    """Return value if it is a positive int, else default."""
    return value if is_positive_int(value) else default  # type: ignore[return-value]


def coerce_color(value: object, default: str) -> str:
    """Return value if it is a hex color string, else default."""
    return value if is_hex_color(value) else default  # type: ignore[return-value]


def coerce_font_family(value: object, default: FontFamily) -> FontFamily:
    """Map a stored font name to FontFamily, falling back to default."""
    if isinstance(value, FontFamily):
        return value
    try:
        return FontFamily(str(value))
    except ValueError:
        logger.debug("Unknown font family %r, using %s", value, default)
        return default


@dataclass(frozen=True, slots=True)
class SlideStyle:
    """A partial style; unset fields defer to the next level of defaults.

    Used as the engine-level default style between per-slide values and
    the global settings.

    Attributes:
        font_size: Font size in points, or None.
        font_color: Hex text color, or None.
        background_color: Hex background color, or None.
        font_family: Font family, or None.
    """

    font_size: int | None = None
    font_color: str | None = None
    background_color: str | None = None
    font_family: FontFamily | None = None
