from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget

from typespeed.core.dictionary import load_dictionary_or_fallback
from typespeed.core.game import TypingGame
from typespeed.core.sentence import SentenceError
from typespeed.core.session import SessionStatus, is_character_key
from typespeed.core.settings import Settings
from typespeed.ui.colors import TypingColors
from typespeed.ui.models import build_cells
from typespeed.ui.typing_widgets import SentenceWidget, StatsPanel

logger = logging.getLogger(__name__)

COMPLETED_TEXT = "Congratulations! You've completed the sentence."


def key_from_event(event: QKeyEvent) -> str:
    """Logical key for ``event``: its character, or the Qt key name for named keys."""
    text = event.text()
    if is_character_key(text):
        return text
    try:
        name = Qt.Key(event.key()).name
    except ValueError:
        return "Unidentified"
    # "Key_Shift" -> "Shift"; always longer than one character
    return name.removeprefix("Key_") if len(name) > 5 else "Unidentified"


class MainWindow(QMainWindow):
    """Typing screen: sentence, live stats, completion banner and a new-sentence button.

    Owns the keyboard subscription and forwards each key press to the
    :class:`TypingGame` it was given.
    """

    def __init__(self, game: TypingGame, settings: Settings) -> None:
        super().__init__()
        self._game = game
        self._settings = settings

        self._sentence_widget: Optional[SentenceWidget] = None
        self._stats_panel: Optional[StatsPanel] = None
        self._banner_label: Optional[QLabel] = None
        self._new_sentence_button: Optional[QPushButton] = None

        self.setWindowTitle("Typing Speed Game")
        self._build_ui()

        self._stats_timer = QTimer(self)
        self._stats_timer.setInterval(settings.refresh_ms)
        self._stats_timer.timeout.connect(self._refresh_stats)

        # the dictionary loads after the window is up; the game has no session until then
        QTimer.singleShot(0, self._load_dictionary)

    def _build_ui(self) -> None:
        central = QWidget(self)
        central.setStyleSheet(f"background: {TypingColors.BG};")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(16)

        title = QLabel("Typing Speed Game", central)
        title.setStyleSheet(f"color: {TypingColors.PRIMARY}; font-size: 26px; font-weight: 700;")
        layout.addWidget(title)

        self._stats_panel = StatsPanel(central)
        layout.addWidget(self._stats_panel)

        prompt = QLabel("Type the following sentence:", central)
        prompt.setStyleSheet(f"color: {TypingColors.TEXT_PRIMARY}; font-size: 16px;")
        layout.addWidget(prompt)

        self._sentence_widget = SentenceWidget(central)
        self._sentence_widget.setStyleSheet(f"background: {TypingColors.CARD_BG}; border-radius: 12px;")
        self._sentence_widget.set_message("Loading dictionary…")
        layout.addWidget(self._sentence_widget, 1)

        self._banner_label = QLabel(COMPLETED_TEXT, central)
        self._banner_label.setAlignment(Qt.AlignCenter)
        self._banner_label.setStyleSheet(
            f"background: {TypingColors.BANNER_BG}; color: {TypingColors.CORRECT};"
            " font-size: 18px; padding: 10px; border-radius: 8px;"
        )
        self._banner_label.hide()
        layout.addWidget(self._banner_label)

        self._new_sentence_button = QPushButton("Try another sentence", central)
        # keep space from activating the button while typing
        self._new_sentence_button.setFocusPolicy(Qt.NoFocus)
        self._new_sentence_button.setEnabled(False)
        self._new_sentence_button.clicked.connect(self._new_sentence)
        layout.addWidget(self._new_sentence_button, 0, Qt.AlignLeft)

        self.setCentralWidget(central)
        self.setFocusPolicy(Qt.StrongFocus)
        self.resize(900, 480)

    def _load_dictionary(self) -> None:
        words = load_dictionary_or_fallback(self._settings.dictionary_path, self._settings.fallback_words)
        self._new_sentence_button.setEnabled(True)
        try:
            self._game.set_dictionary(words)
        except SentenceError as e:
            self._show_generation_error(e)
            return
        self._refresh()

    def _new_sentence(self) -> None:
        try:
            self._game.new_sentence()
        except SentenceError as e:
            self._show_generation_error(e)
            return
        self._refresh()

    def _show_generation_error(self, error: SentenceError) -> None:
        logger.error("Could not generate a sentence: %s", error)
        self._stats_timer.stop()
        self._banner_label.hide()
        self._sentence_widget.set_message("Could not generate a sentence. Try another one.")
        self._stats_panel.set_stats(None)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if self._game.press(key_from_event(event)):
            self._refresh()
            return
        super().keyPressEvent(event)

    def _refresh(self) -> None:
        state = self._game.state
        if state is None:
            return
        self._sentence_widget.set_cells(build_cells(state))
        status = state.status
        self._banner_label.setVisible(status is SessionStatus.COMPLETED)
        if status is SessionStatus.IN_PROGRESS:
            if not self._stats_timer.isActive():
                self._stats_timer.start()
        else:
            self._stats_timer.stop()
        self._refresh_stats()

    def _refresh_stats(self) -> None:
        self._stats_panel.set_stats(self._game.stats())
