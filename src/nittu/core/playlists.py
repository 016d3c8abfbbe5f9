"""Playlist repository: CRUD over the ordered list of custom playlists.

Playlists are addressed by position only. Any create, update or delete can
shift positions, so callers must re-fetch with list_all() after a mutation
instead of holding on to an index.

Every mutation re-reads the stored list, applies the change and writes the
whole list back in a single write under one key.
"""

import logging
from dataclasses import replace

from PySide6.QtCore import QObject, Signal

from nittu.core.storage import KEY_CUSTOM_PLAYLISTS, KeyValueStorage
from nittu.errors import CapacityError, PersistenceError, PlaylistIndexError, ValidationError
from nittu.models.playlist import MAX_SLIDES, Playlist
from nittu.models.slide import Slide

logger = logging.getLogger(__name__)

MAX_PLAYLISTS = 10


def _check_index(index: int, size: int, what: str) -> None:
    """Raise PlaylistIndexError unless 0 <= index < size."""
    if not 0 <= index < size:
        msg = f"{what} index {index} out of range (0-{size - 1})" if size else f"No {what}s"
        raise PlaylistIndexError(msg)


def _validate_entry(entry: Playlist) -> None:
    if not entry.has_name:
        msg = "Playlist name is required."
        raise ValidationError(msg)
    if entry.slide_count > MAX_SLIDES:
        msg = f"Playlist has {entry.slide_count} slides, maximum is {MAX_SLIDES}."
        raise CapacityError(msg)


class PlaylistRepository(QObject):
    """Persisted, bounded, position-addressed list of playlists.

    Signals:
        playlists_changed: Emitted with the new list after each successful write.

    Example:
        repo = PlaylistRepository(KeyValueStorage())
        repo.create(Playlist(name="Colors", slides=(Slide.draft("Red"),)))
        for index, playlist in enumerate(repo.list_all()):
            print(index, playlist.name)
    """

    playlists_changed = Signal(object)

    def __init__(self, storage: KeyValueStorage, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._storage = storage

    def list_all(self) -> list[Playlist]:
        """Load all playlists in stored order.

        Returns:
            The playlists, or an empty list if storage is empty or malformed.
        """
        try:
            raw_data = self._storage.read_json(KEY_CUSTOM_PLAYLISTS)
        except PersistenceError as e:
            logger.warning("Failed to load playlists, treating as empty: %s", e)
            return []

        if raw_data is None:
            return []
        if not isinstance(raw_data, list):
            logger.warning(
                "Stored playlists is %s, not a list; treating as empty",
                type(raw_data).__name__,
            )
            return []

        playlists: list[Playlist] = []
        for raw_item in raw_data:
            if not isinstance(raw_item, dict):
                logger.warning("Skipping invalid playlist entry: %r", raw_item)
                continue
            try:
                playlists.append(Playlist.from_dict(raw_item))
            except (TypeError, ValueError) as e:
                logger.warning("Skipping invalid playlist entry: %s", e)
        if len(playlists) > MAX_PLAYLISTS:
            logger.warning(
                "Found %d stored playlists, keeping the first %d",
                len(playlists),
                MAX_PLAYLISTS,
            )
        return playlists[:MAX_PLAYLISTS]

    def count(self) -> int:
        """Return the number of stored playlists."""
        return len(self.list_all())

    def can_create(self) -> bool:
        """Return True if another playlist fits."""
        return self.count() < MAX_PLAYLISTS

    def get(self, index: int) -> Playlist:
        """Return the playlist at index.

        Raises:
            PlaylistIndexError: If index is out of range.
        """
        playlists = self.list_all()
        _check_index(index, len(playlists), "playlist")
        return playlists[index]

    def create(self, entry: Playlist) -> None:
        """Append a new playlist.

        Args:
            entry: Playlist to append.

        Raises:
            ValidationError: If the name is blank.
            CapacityError: If MAX_PLAYLISTS playlists already exist, or the
                entry holds more than MAX_SLIDES slides.
            PersistenceError: If the write fails.
        """
        _validate_entry(entry)
        playlists = self.list_all()
        if len(playlists) >= MAX_PLAYLISTS:
            msg = f"Maximum of {MAX_PLAYLISTS} custom playlists reached."
            raise CapacityError(msg)
        playlists.append(entry)
        self._write(playlists)
        logger.info("Created playlist '%s' at index %d", entry.name, len(playlists) - 1)

    def update(self, index: int, entry: Playlist) -> None:
        """Replace the playlist at index.

        Raises:
            PlaylistIndexError: If index is out of range.
            ValidationError: If the name is blank.
            PersistenceError: If the write fails.
        """
        playlists = self.list_all()
        _check_index(index, len(playlists), "playlist")
        _validate_entry(entry)
        playlists[index] = entry
        self._write(playlists)
        logger.info("Updated playlist '%s' at index %d", entry.name, index)

    def delete(self, index: int) -> None:
        """Remove the playlist at index; later playlists shift down by one.

        Raises:
            PlaylistIndexError: If index is out of range.
            PersistenceError: If the write fails.
        """
        playlists = self.list_all()
        _check_index(index, len(playlists), "playlist")
        removed = playlists.pop(index)
        self._write(playlists)
        logger.info("Deleted playlist '%s' from index %d", removed.name, index)

    # -- Draft editing ---------------------------------------------------------

    @staticmethod
    def add_slide(draft: Playlist, slide: Slide) -> Playlist:
        """Return draft with slide appended.

        Raises:
            CapacityError: If the draft already holds MAX_SLIDES slides.
            ValidationError: If the slide text is blank.
        """
        if draft.is_full:
            msg = f"Maximum of {MAX_SLIDES} slides reached."
            raise CapacityError(msg)
        if not slide.has_text:
            msg = "Slide text is required."
            raise ValidationError(msg)
        return replace(draft, slides=(*draft.slides, slide))

    @staticmethod
    def remove_slide(draft: Playlist, index: int) -> Playlist:
        """Return draft without the slide at index.

        Raises:
            PlaylistIndexError: If index is out of range.
        """
        _check_index(index, len(draft.slides), "slide")
        return replace(draft, slides=draft.slides[:index] + draft.slides[index + 1 :])

    @staticmethod
    def replace_slide(draft: Playlist, index: int, slide: Slide) -> Playlist:
        """Return draft with the slide at index replaced.

        Raises:
            PlaylistIndexError: If index is out of range.
            ValidationError: If the slide text is blank.
        """
        _check_index(index, len(draft.slides), "slide")
        if not slide.has_text:
            msg = "Slide text is required."
            raise ValidationError(msg)
        slides = list(draft.slides)
        slides[index] = slide
        return replace(draft, slides=tuple(slides))

    def _write(self, playlists: list[Playlist]) -> None:
        self._storage.write_json(KEY_CUSTOM_PLAYLISTS, [p.to_dict() for p in playlists])
        self.playlists_changed.emit(playlists)
