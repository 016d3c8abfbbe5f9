"""Exception hierarchy shared by the playback and persistence core.

All errors derive from FlashcardError so the presentation layer can report
any core failure with a single handler. Subclasses also derive from the
closest builtin (ValueError, IndexError) for callers that expect those.
"""


class FlashcardError(Exception):
    """Base class for all flashcard core errors."""


class ValidationError(FlashcardError, ValueError):
    """A required field is empty or a value is malformed."""


class CapacityError(FlashcardError):
    """A playlist or slide count ceiling would be exceeded."""


class PlaylistIndexError(FlashcardError, IndexError):
    """A playlist or slide index is stale or out of range."""


class PersistenceError(FlashcardError):
    """Storage could not be read or written, or held malformed content."""
