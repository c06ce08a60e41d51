from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class SessionState:
    """Progress of one attempt at typing ``target_sentence``.

    Only correct characters are ever appended to ``input_so_far``, so it is
    always a prefix of the target and ``cursor_position`` is its length.
    A new sentence gets a new ``SessionState``; instances are never reset.
    """

    target_sentence: str
    input_so_far: List[str] = field(default_factory=list)
    cursor_position: int = 0
    start_time: Optional[float] = None
    end_time: Optional[float] = None
    mistake_count: int = 0
    words_completed: int = 0

    @property
    def status(self) -> SessionStatus:
        if self.end_time is not None:
            return SessionStatus.COMPLETED
        if self.start_time is not None:
            return SessionStatus.IN_PROGRESS
        return SessionStatus.IDLE

    @property
    def typed(self) -> str:
        """Characters accepted so far, as a string."""
        return "".join(self.input_so_far)

    @property
    def expected(self) -> Optional[str]:
        """Next character to type, or None once the end of the sentence is reached."""
        if self.cursor_position >= len(self.target_sentence):
            return None
        return self.target_sentence[self.cursor_position]

    @property
    def remaining(self) -> int:
        return len(self.target_sentence) - self.cursor_position


def is_character_key(key: object) -> bool:
    """True for keys that produce a single printable character (space included)."""
    return isinstance(key, str) and len(key) == 1 and key.isprintable()


class InputProcessor:
    """Applies keystrokes to a :class:`SessionState`.

    A matching key is appended and advances the cursor; a wrong character
    only counts as a mistake. Named keys such as ``"Shift"`` are ignored
    entirely. The clock starts on the first character key, right or wrong.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def process_key(self, state: SessionState, key: str) -> bool:
        """Apply ``key`` to ``state``. Returns True if the state changed."""
        if not is_character_key(key):
            return False
        expected = state.expected
        if expected is None:
            return False

        now = self._clock()
        if key == expected:
            state.input_so_far.append(key)
            state.cursor_position += 1
            if key == " ":
                state.words_completed += 1
            if state.cursor_position == len(state.target_sentence) and state.end_time is None:
                state.end_time = now
        else:
            state.mistake_count += 1
            logger.debug("Expected %r at %d, got %r", expected, state.cursor_position, key)

        if state.start_time is None:
            state.start_time = now
        return True
