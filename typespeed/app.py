"""Application entry point and setup for the typing speed game."""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from typespeed.core.game import TypingGame
from typespeed.core.sentence import SentenceGenerator
from typespeed.core.settings import load_settings
from typespeed.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings, build the game and start the main window."""
    configure_logging()
    settings = load_settings(os.environ.get("TYPESPEED_SETTINGS"))
    logging.info("Sentence policy: %s", settings.policy)

    app = QApplication(sys.argv)
    app.setApplicationName("TypeSpeed")
    app.setApplicationDisplayName("TypeSpeed")

    game = TypingGame(
        generator=SentenceGenerator(settings.policy),
        max_attempts=settings.max_attempts,
    )
    window = MainWindow(game=game, settings=settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
