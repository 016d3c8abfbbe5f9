"""Built-in card sets and slide sequence resolution."""

import logging
import string
from collections.abc import Mapping, Sequence
from enum import StrEnum

from nittu.models.slide import Slide

logger = logging.getLogger(__name__)

ANIMALS: tuple[str, ...] = ("🐱", "🐶", "🦁", "🐯", "🦆", "🐻", "🐢", "🦒", "🦓")

# A card is a full Slide, a stored slide record, or a bare string
Card = Slide | Mapping[str, object] | str


class BuiltinPlaylist(StrEnum):
    """Fixed card sets generated rather than stored."""

    ALPHABET = "alphabet"
    NUMBERS = "numbers"
    ANIMALS = "animals"

    @property
    def display_title(self) -> str:
        """Return the label shown on the home screen."""
        return _TITLES[self]

    @property
    def cards(self) -> tuple[str, ...]:
        """Return the canonical card sequence."""
        if self is BuiltinPlaylist.ALPHABET:
            return tuple(string.ascii_uppercase)
        if self is BuiltinPlaylist.NUMBERS:
            return tuple(string.digits)
        return ANIMALS


_TITLES = {
    BuiltinPlaylist.ALPHABET: "A–Z",
    BuiltinPlaylist.NUMBERS: "0–9",
    BuiltinPlaylist.ANIMALS: "Animals 🐾",
}


def resolve_slides(source: BuiltinPlaylist | str | Sequence[Card] | None) -> list[Card]:
    """Resolve a playlist source to the cards to play.

    Args:
        source: A built-in identifier (enum or its string value), or an
            explicit custom sequence which is used verbatim.

    Returns:
        The resolved cards. Unknown identifiers and None give an empty list.
    """
    if source is None:
        return []
    if isinstance(source, str):
        try:
            return list(BuiltinPlaylist(source).cards)
        except ValueError:
            logger.warning("Unknown built-in playlist: %r", source)
            return []
    return list(source)
