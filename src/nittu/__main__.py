"""Main entry point for the Nittu flashcard viewer."""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from nittu.core.catalog import BuiltinPlaylist, resolve_slides
from nittu.core.playback import PlaybackEngine
from nittu.core.playlists import PlaylistRepository
from nittu.core.settings_store import SettingsStore
from nittu.core.storage import KeyValueStorage
from nittu.errors import FlashcardError, PlaylistIndexError
from nittu.ui.flashcard_view import FlashcardView

# Enable logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the command line parser."""
    parser = argparse.ArgumentParser(
        prog="nittu",
        description="Nittu - baby flashcards",
    )
    parser.add_argument(
        "builtin",
        nargs="?",
        default=BuiltinPlaylist.ALPHABET.value,
        choices=[b.value for b in BuiltinPlaylist],
        help="built-in card set (default: alphabet)",
    )
    parser.add_argument(
        "--playlist", type=int, default=None, metavar="INDEX",
        help="play the custom playlist at INDEX instead",
    )
    parser.add_argument(
        "--list", action="store_true", help="list playlists and exit",
    )
    parser.add_argument(
        "--windowed", action="store_true", help="do not go full screen",
    )
    return parser


def list_playlists(repo: PlaylistRepository) -> None:
    """Print built-in and custom playlists."""
    for builtin in BuiltinPlaylist:
        print(f"{builtin.value:>10}  {builtin.display_title}")
    for index, playlist in enumerate(repo.list_all()):
        print(f"{index:>10}  {playlist.name} ({playlist.slide_count} slides)")


def main() -> int:
    """Run the Nittu viewer.

    Returns:
        Exit code (0 for success).
    """
    QApplication.setApplicationName("Nittu")
    QApplication.setOrganizationName("Nittu")

    app = QApplication(sys.argv)
    parsed = build_parser().parse_args(app.arguments()[1:])

    # Load-on-start: both stores are created once and passed explicitly
    storage = KeyValueStorage()
    settings_store = SettingsStore(storage)
    settings = settings_store.load()
    repo = PlaylistRepository(storage)

    if parsed.list:
        list_playlists(repo)
        return 0

    if parsed.playlist is not None:
        try:
            playlist = repo.get(parsed.playlist)
        except PlaylistIndexError as e:
            logger.error("Cannot open playlist: %s", e)
            QMessageBox.critical(None, "Playlist Not Found", str(e))
            return 1
        engine = PlaybackEngine(
            resolve_slides(playlist.slides), delay_ms=playlist.delay_ms, settings=settings
        )
        logger.info("Playing custom playlist '%s'", playlist.name)
    else:
        engine = PlaybackEngine(resolve_slides(parsed.builtin), settings=settings)
        logger.info("Playing built-in playlist '%s'", parsed.builtin)

    view = FlashcardView(engine)
    view.setWindowTitle("Nittu")
    if parsed.windowed:
        view.resize(800, 600)
        view.show()
    else:
        view.showFullScreen()

    exit_code = app.exec()

    # Flush-on-exit
    try:
        settings_store.flush()
    except FlashcardError:
        logger.exception("Failed to flush settings on exit")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
