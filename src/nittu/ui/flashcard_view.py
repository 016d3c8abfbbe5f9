"""Full-screen flashcard viewer.

Renders the playback engine's current card and maps input to navigation:
tap the left half to go back, the right half to go forward, and the close
button or Escape to leave.

Usage:
    from nittu.ui.flashcard_view import FlashcardView

    view = FlashcardView(engine)
    view.showFullScreen()
"""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QFont, QKeyEvent, QMouseEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from nittu.core.playback import PlaybackEngine, RenderedSlide

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "No content"
_PLACEHOLDER_STYLE = "background-color: #000000; color: #ffffff;"


class FlashcardView(QWidget):
    """Widget showing one card at a time from a PlaybackEngine.

    The view closes itself when the engine exits.

    Example:
        engine = PlaybackEngine(resolve_slides("animals"))
        view = FlashcardView(engine)
        view.show()
    """

    def __init__(self, engine: PlaybackEngine, parent: QWidget | None = None) -> None:
        """Initialize the viewer.

        Args:
            engine: Engine supplying cards and receiving navigation.
            parent: Optional parent widget.
        """
        super().__init__(parent)
        self._engine = engine
        self._closing = False
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)

        top_row = QHBoxLayout()
        top_row.addStretch()
        self._close_button = QPushButton("✕")
        self._close_button.setFlat(True)
        self._close_button.setFixedSize(44, 44)
        self._close_button.setStyleSheet("border: none; font-size: 28px; color: #ffffff;")
        self._close_button.clicked.connect(engine.close)
        top_row.addWidget(self._close_button)
        layout.addLayout(top_row)

        self._label = QLabel()
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        layout.addWidget(self._label, 1)

        engine.slide_changed.connect(self.show_slide)
        engine.exited.connect(self._on_exited)

        current = engine.current_slide
        if current is None:
            self.show_placeholder()
        else:
            self.show_slide(current)

    @property
    def text(self) -> str:
        """Return the text currently displayed."""
        return self._label.text()

    def show_slide(self, slide: RenderedSlide) -> None:
        """Render a resolved card.

        Args:
            slide: Card with resolved text and style.
        """
        self.setStyleSheet(f"FlashcardView {{ background-color: {slide.background_color}; }}")
        self._label.setStyleSheet(f"color: {slide.font_color};")
        font = QFont(str(slide.font_family))
        font.setPointSize(slide.font_size)
        self._label.setFont(font)
        self._label.setText(slide.text)

    def show_placeholder(self) -> None:
        """Render the empty-playlist state."""
        self.setStyleSheet(f"FlashcardView {{ {_PLACEHOLDER_STYLE} }}")
        self._label.setStyleSheet("color: #ffffff;")
        self._label.setText(PLACEHOLDER_TEXT)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        """Go back on the left half, forward on the right half."""
        if event.button() == Qt.MouseButton.LeftButton:
            if event.position().x() < self.width() / 2:
                self._engine.prev()
            else:
                self._engine.next()
            event.accept()
            return
        super().mousePressEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        """Arrow keys navigate, Escape closes."""
        key = event.key()
        if key == Qt.Key.Key_Left:
            self._engine.prev()
        elif key == Qt.Key.Key_Right:
            self._engine.next()
        elif key == Qt.Key.Key_Escape:
            self._engine.close()
        else:
            super().keyPressEvent(event)

    def _on_exited(self) -> None:
        if not self._closing:
            self.close()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        """End the playback session when the window is closed externally."""
        self._closing = True
        if not self._engine.is_exited:
            self._engine.close()
        super().closeEvent(event)
