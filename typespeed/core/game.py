from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence, Tuple

from typespeed.core import metrics
from typespeed.core.metrics import SessionStats
from typespeed.core.sentence import EmptyDictionaryError, GenerationError, SentenceGenerator
from typespeed.core.session import InputProcessor, SessionState, SessionStatus

logger = logging.getLogger(__name__)


class TypingGame:
    """Owns the word list and the current :class:`SessionState`.

    The dictionary may arrive after construction; until then there is no
    session and key presses are ignored. Every new sentence replaces the
    session object as a whole.
    """

    def __init__(
        self,
        generator: Optional[SentenceGenerator] = None,
        processor: Optional[InputProcessor] = None,
        max_attempts: int = 5,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._generator = generator or SentenceGenerator()
        self._processor = processor or InputProcessor(clock)
        self._max_attempts = max_attempts
        self._clock = clock
        self._dictionary: Tuple[str, ...] = ()
        self._state: Optional[SessionState] = None

    @property
    def dictionary_ready(self) -> bool:
        return bool(self._dictionary)

    @property
    def state(self) -> Optional[SessionState]:
        return self._state

    @property
    def status(self) -> Optional[SessionStatus]:
        return self._state.status if self._state is not None else None

    def set_dictionary(self, words: Sequence[str]) -> SessionState:
        """Install the word list and start the first session."""
        self._dictionary = tuple(words)
        return self.new_sentence()

    def new_sentence(self) -> SessionState:
        """Discard the current session and start one on a fresh sentence."""
        if not self._dictionary:
            raise EmptyDictionaryError("no dictionary loaded yet")
        self._state = None
        last_error: Optional[GenerationError] = None
        for attempt in range(1, self._max_attempts + 1):
            try:
                sentence = self._generator.generate(self._dictionary)
            except GenerationError as e:
                logger.warning("Sentence generation attempt %d/%d failed: %s", attempt, self._max_attempts, e)
                last_error = e
                continue
            self._state = SessionState(target_sentence=sentence)
            return self._state
        assert last_error is not None
        raise last_error

    def press(self, key: str) -> bool:
        """Feed one key to the current session. Returns True if anything changed."""
        state = self._state
        if state is None:
            return False
        was_completed = state.status is SessionStatus.COMPLETED
        changed = self._processor.process_key(state, key)
        if changed and not was_completed and state.status is SessionStatus.COMPLETED:
            logger.info(
                "Sentence completed: %d wpm, %.2f%% accuracy",
                metrics.wpm(state),
                metrics.accuracy(state),
            )
        return changed

    def wpm(self, now: Optional[float] = None) -> int:
        if self._state is None:
            return 0
        return metrics.wpm(self._state, self._clock() if now is None else now)

    def accuracy(self) -> float:
        if self._state is None:
            return 100.0
        return metrics.accuracy(self._state)

    def stats(self, now: Optional[float] = None) -> Optional[SessionStats]:
        if self._state is None:
            return None
        return metrics.summarize(self._state, self._clock() if now is None else now)
