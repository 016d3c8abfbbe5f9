"""Nittu - auto-advancing flashcards for young children."""

__version__ = "0.1.0"
