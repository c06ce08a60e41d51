"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from typespeed.core.session import SessionState


class CharStatus(Enum):
    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    CURSOR = "cursor"


@dataclass(frozen=True)
class SentenceCell:
    """One character of the target sentence and how to draw it."""

    char: str
    status: CharStatus


def build_cells(state: SessionState) -> List[SentenceCell]:
    cells: List[SentenceCell] = []
    for i, char in enumerate(state.target_sentence):
        if i < state.cursor_position:
            status = CharStatus.CORRECT if state.input_so_far[i] == char else CharStatus.INCORRECT
        elif i == state.cursor_position:
            status = CharStatus.CURSOR
        else:
            status = CharStatus.PENDING
        cells.append(SentenceCell(char=char, status=status))
    return cells
