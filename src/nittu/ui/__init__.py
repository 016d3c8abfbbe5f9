"""Presentation widgets driven by the playback engine."""

from nittu.ui.flashcard_view import FlashcardView

__all__ = ["FlashcardView"]
