"""Typing screen widgets: the highlighted sentence and the stats panel."""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QFontMetricsF, QPainter
from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget

from typespeed.core.metrics import SessionStats
from typespeed.ui.colors import TypingColors
from typespeed.ui.models import CharStatus, SentenceCell

_STATUS_COLORS = {
    CharStatus.PENDING: TypingColors.PENDING,
    CharStatus.CORRECT: TypingColors.CORRECT,
    CharStatus.INCORRECT: TypingColors.INCORRECT,
    CharStatus.CURSOR: TypingColors.TEXT_PRIMARY,
}


class SentenceWidget(QWidget):
    """Draws the sentence character by character, wrapping at word boundaries."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._cells: List[SentenceCell] = []
        self._message: str = ""
        font = self.font()
        font.setPointSize(18)
        font.setFamily("monospace")
        self.setFont(font)
        self.setMinimumHeight(160)

    def set_cells(self, cells: List[SentenceCell]) -> None:
        self._cells = list(cells)
        self._message = ""
        self.update()

    def set_message(self, message: str) -> None:
        """Show ``message`` instead of a sentence."""
        self._cells = []
        self._message = message
        self.update()

    def _lines(self, fm: QFontMetricsF) -> List[List[SentenceCell]]:
        # split into words (trailing space kept) and wrap them to the widget width
        words: List[List[SentenceCell]] = []
        current: List[SentenceCell] = []
        for cell in self._cells:
            current.append(cell)
            if cell.char == " ":
                words.append(current)
                current = []
        if current:
            words.append(current)

        width = max(1.0, self.width() - 20.0)
        lines: List[List[SentenceCell]] = [[]]
        line_width = 0.0
        for word in words:
            word_width = sum(fm.horizontalAdvance(c.char) for c in word)
            if lines[-1] and line_width + word_width > width:
                lines.append([])
                line_width = 0.0
            lines[-1].extend(word)
            line_width += word_width
        return lines

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setFont(self.font())
        if self._message:
            painter.setPen(QColor(TypingColors.INCORRECT))
            painter.drawText(self.rect(), Qt.AlignCenter, self._message)
            return

        fm = QFontMetricsF(self.font())
        line_height = fm.height() * 1.4
        y = 10.0
        for line in self._lines(fm):
            x = 10.0
            for cell in line:
                advance = fm.horizontalAdvance(cell.char)
                rect = QRectF(x, y, advance, fm.height())
                if cell.status is CharStatus.CURSOR:
                    painter.fillRect(rect, QColor(TypingColors.CURSOR_BG))
                    painter.setPen(QColor(TypingColors.PRIMARY))
                    painter.drawLine(rect.bottomLeft(), rect.bottomRight())
                painter.setPen(QColor(_STATUS_COLORS[cell.status]))
                painter.drawText(rect, Qt.AlignCenter, cell.char)
                x += advance
            y += line_height


class StatsPanel(QWidget):
    """Words per minute and accuracy readout."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._wpm_label = QLabel(self)
        self._accuracy_label = QLabel(self)
        for label in (self._wpm_label, self._accuracy_label):
            label.setStyleSheet(f"color: {TypingColors.TEXT_SECONDARY}; font-size: 16px;")
            layout.addWidget(label)
        layout.addStretch(1)
        self.set_stats(None)

    def set_stats(self, stats: Optional[SessionStats]) -> None:
        wpm = stats.wpm if stats is not None else 0
        accuracy = stats.accuracy if stats is not None else 100.0
        self._wpm_label.setText(f"Words per minute: {wpm}")
        self._accuracy_label.setText(f"Accuracy: {accuracy:.2f}%")
