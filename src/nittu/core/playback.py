"""Playback engine: the slide index state machine behind the viewer.

States are PLAYING(i), PAUSED(i), the terminal EXITED, and EMPTY for a
sequence with no cards. Autoplay runs exactly while the state is PLAYING:

- tick (timer, PLAYING only): i+1 if there is one, else wrap to 0
- next(): PAUSED(i+1), or EXITED from the last card
- prev(): PAUSED(i-1), or PAUSED(0) from the first card
- close(): EXITED

Each engine owns a single single-shot QTimer. Every transition stops it
first and restarts it only when the new state is PLAYING, so at most one
tick is ever pending.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum

from PySide6.QtCore import QObject, QTimer, Signal

from nittu.core.catalog import Card
from nittu.models.settings import DEFAULT_DELAY_MS, Settings
from nittu.models.slide import Slide
from nittu.models.style import FontFamily, SlideStyle

logger = logging.getLogger(__name__)

MISSING_TEXT = "?"


class PlaybackState(StrEnum):
    """Playback engine state."""

    PLAYING = "playing"
    PAUSED = "paused"
    EXITED = "exited"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class RenderedSlide:
    """Render-ready card: text plus fully resolved style.

    Attributes:
        index: Position of the card in the sequence.
        text: Text to display.
        font_size: Font size in points.
        font_color: Hex text color.
        background_color: Hex background color.
        font_family: Font family.
    """

    index: int
    text: str
    font_size: int
    font_color: str
    background_color: str
    font_family: FontFamily


def _to_slide(card: Card) -> Slide:
    if isinstance(card, Slide):
        return card
    if isinstance(card, str):
        return Slide(text=card)
    if isinstance(card, Mapping):
        return Slide.from_dict(card)
    msg = f"Unsupported card type: {type(card).__name__}"
    raise TypeError(msg)


class PlaybackEngine(QObject):
    """Drives the current card index for one viewing session.

    Signals:
        slide_changed: Emitted with the new RenderedSlide when the index moves.
        state_changed: Emitted with the new PlaybackState.
        exited: Emitted once when the session ends.

    Example:
        engine = PlaybackEngine(resolve_slides("alphabet"), settings=store.settings)
        engine.slide_changed.connect(view.show_slide)
        engine.exited.connect(view.close)
    """

    slide_changed = Signal(object)
    state_changed = Signal(object)
    exited = Signal()

    def __init__(
        self,
        cards: Sequence[Card],
        *,
        delay_ms: int | None = None,
        style: SlideStyle | None = None,
        settings: Settings | None = None,
        parent: QObject | None = None,
    ) -> None:
        """Initialize the engine and arm autoplay.

        Autoplay starts at the first card for every playlist. The first tick
        can only fire once control returns to the Qt event loop, so signals
        connected right after construction see every transition.

        Args:
            cards: Resolved cards (Slides, stored slide records or strings).
            delay_ms: Autoplay delay; zero or None uses the settings delay.
            style: Engine-level default style, consulted before settings.
            settings: Global defaults; built-in defaults when omitted.
            parent: Optional Qt parent.
        """
        super().__init__(parent)
        self._slides: tuple[Slide, ...] = tuple(_to_slide(c) for c in cards)
        # Bare strings are shown verbatim, even when blank
        self._verbatim = tuple(isinstance(c, str) for c in cards)
        self._style = style or SlideStyle()
        self._settings = settings or Settings()
        self._delay_ms = self._resolve_delay(delay_ms)
        self._index = 0

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

        if self._slides:
            self._state = PlaybackState.PLAYING
            self._timer.start(self._delay_ms)
        else:
            self._state = PlaybackState.EMPTY
            logger.debug("No cards to play, showing placeholder")

    def _resolve_delay(self, delay_ms: int | None) -> int:
        if delay_ms is not None and delay_ms > 0:
            return delay_ms
        if self._settings.delay_ms > 0:
            return self._settings.delay_ms
        return DEFAULT_DELAY_MS

    # -- Properties ------------------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        """Return the current state."""
        return self._state

    @property
    def index(self) -> int:
        """Return the current card index."""
        return self._index

    @property
    def slide_count(self) -> int:
        """Return the number of cards."""
        return len(self._slides)

    @property
    def slides(self) -> tuple[Slide, ...]:
        """Return the normalized cards."""
        return self._slides

    @property
    def delay_ms(self) -> int:
        """Return the effective autoplay delay."""
        return self._delay_ms

    @property
    def is_autoplay_active(self) -> bool:
        """Return True while autoplay is advancing cards."""
        return self._state is PlaybackState.PLAYING

    @property
    def is_exited(self) -> bool:
        """Return True once the session has ended."""
        return self._state is PlaybackState.EXITED

    @property
    def current_slide(self) -> RenderedSlide | None:
        """Return the resolved current card, or None if there is nothing to show."""
        if self._state in (PlaybackState.EMPTY, PlaybackState.EXITED):
            return None
        return self._render(self._index)

    # -- Navigation ------------------------------------------------------------

    def next(self) -> None:
        """Go to the next card and pause; exit from the last card."""
        if not self._is_navigable():
            return
        if self._index + 1 < len(self._slides):
            self._transition(PlaybackState.PAUSED, self._index + 1)
        else:
            self._exit()

    def prev(self) -> None:
        """Go to the previous card and pause; stay on the first card."""
        if not self._is_navigable():
            return
        self._transition(PlaybackState.PAUSED, max(0, self._index - 1))

    def pause(self) -> None:
        """Stop autoplay on the current card."""
        if self._state is PlaybackState.PLAYING:
            self._transition(PlaybackState.PAUSED, self._index)

    def resume(self) -> None:
        """Restart autoplay from the current card."""
        if self._state is PlaybackState.PAUSED:
            self._transition(PlaybackState.PLAYING, self._index)

    def close(self) -> None:
        """End the session."""
        if self._state is not PlaybackState.EXITED:
            self._exit()

    # -- Internals -------------------------------------------------------------

    def _is_navigable(self) -> bool:
        return self._state in (PlaybackState.PLAYING, PlaybackState.PAUSED)

    def _on_timeout(self) -> None:
        """Advance one card; ignored unless still playing."""
        if self._state is not PlaybackState.PLAYING:
            logger.debug("Ignoring stale autoplay tick in state %s", self._state)
            return
        next_index = self._index + 1 if self._index + 1 < len(self._slides) else 0
        self._transition(PlaybackState.PLAYING, next_index)

    def _transition(self, state: PlaybackState, index: int) -> None:
        self._timer.stop()

        state_changed = state is not self._state
        index_changed = index != self._index
        self._state = state
        self._index = index

        if state is PlaybackState.PLAYING:
            self._timer.start(self._delay_ms)

        if index_changed:
            self.slide_changed.emit(self._render(index))
        if state_changed:
            logger.debug("Playback %s at card %d", state, index)
            self.state_changed.emit(state)

    def _exit(self) -> None:
        self._timer.stop()
        self._state = PlaybackState.EXITED
        logger.debug("Playback exited")
        self.state_changed.emit(PlaybackState.EXITED)
        self.exited.emit()

    def _render(self, index: int) -> RenderedSlide:
        slide = self._slides[index]
        style = self._style
        settings = self._settings

        font_size = slide.font_size or style.font_size or settings.font_size
        font_color = slide.font_color or style.font_color or settings.font_color
        background_color = (
            slide.background_color or style.background_color or settings.background_color
        )
        font_family = slide.font_family or style.font_family or settings.font_family

        return RenderedSlide(
            index=index,
            text=slide.text if slide.text or self._verbatim[index] else MISSING_TEXT,
            font_size=font_size,
            font_color=font_color,
            background_color=background_color,
            font_family=FontFamily(font_family),
        )
