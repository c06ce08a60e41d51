"""Typing speed and accuracy derived from a :class:`SessionState`.

WPM counts words as completed spaces, so the last word of a sentence never
contributes. Accuracy is accepted characters over all character keystrokes.
Both are total: degenerate states yield 0 / 100.0 instead of raising.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Optional

from typespeed.core.session import SessionState, SessionStatus


@dataclass(frozen=True)
class SessionStats:
    """Snapshot of the live metrics of a session."""

    wpm: int
    accuracy: float
    mistakes: int
    words_completed: int
    elapsed_seconds: float
    completed: bool


def _effective_time(state: SessionState, now: Optional[float]) -> float:
    if state.end_time is not None:
        return state.end_time
    return time.time() if now is None else now


def elapsed_seconds(state: SessionState, now: Optional[float] = None) -> float:
    """Seconds since the first keystroke, frozen once the sentence is done."""
    if state.start_time is None:
        return 0.0
    return max(0.0, _effective_time(state, now) - state.start_time)


def wpm(state: SessionState, now: Optional[float] = None) -> int:
    if state.start_time is None:
        return 0
    elapsed_minutes = (_effective_time(state, now) - state.start_time) / 60.0
    if elapsed_minutes <= 0:
        return 0
    value = state.words_completed / elapsed_minutes
    if not math.isfinite(value):
        return 0
    # half-up, not banker's rounding
    return int(math.floor(value + 0.5))


def accuracy(state: SessionState) -> float:
    correct = len(state.input_so_far)
    total = correct + state.mistake_count
    if total == 0:
        return 100.0
    # half-up to 2 places, not banker's rounding
    return math.floor(correct * 10000 / total + 0.5) / 100


def summarize(state: SessionState, now: Optional[float] = None) -> SessionStats:
    """Bundle all metrics for ``state`` at time ``now`` (defaults to the current time)."""
    if now is None:
        now = time.time()
    return SessionStats(
        wpm=wpm(state, now),
        accuracy=accuracy(state),
        mistakes=state.mistake_count,
        words_completed=state.words_completed,
        elapsed_seconds=elapsed_seconds(state, now),
        completed=state.status is SessionStatus.COMPLETED,
    )
