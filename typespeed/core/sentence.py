from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


class SentenceError(Exception):
    """Base class for sentence generation failures."""


class EmptyDictionaryError(SentenceError):
    """The dictionary holds no usable words."""


class GenerationError(SentenceError):
    """No word could be appended without breaking the length policy."""


@dataclass(frozen=True)
class LengthPolicy:
    """Sentence length targets.

    Words are drawn freely until the sentence is ``bounded_from`` characters
    long, then only words that keep it within ``max_length`` are considered.
    Generation stops as soon as the sentence reaches ``target_length``.
    """

    bounded_from: int = 110
    target_length: int = 115
    max_length: int = 125

    def __post_init__(self) -> None:
        if min(self.bounded_from, self.target_length, self.max_length) <= 0:
            raise ValueError("sentence lengths must be positive")
        if self.bounded_from > self.target_length:
            raise ValueError("bounded_from must not exceed target_length")
        if self.target_length > self.max_length:
            raise ValueError("target_length must not exceed max_length")


class SentenceGenerator:
    """Builds practice sentences from a word list under a :class:`LengthPolicy`."""

    def __init__(
        self,
        policy: Optional[LengthPolicy] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._policy = policy or LengthPolicy()
        self._rng = rng or random.Random()

    @property
    def policy(self) -> LengthPolicy:
        return self._policy

    def generate(self, dictionary: Sequence[str]) -> str:
        """Return one sentence of space-separated dictionary words.

        Raises :class:`EmptyDictionaryError` when ``dictionary`` has no
        non-blank words and :class:`GenerationError` when the random draw
        painted itself into a corner (retrying may succeed).
        """
        words = [word.strip() for word in dictionary if word and word.strip()]
        if not words:
            raise EmptyDictionaryError("dictionary contains no words")

        policy = self._policy
        sentence = ""
        while len(sentence) < policy.target_length:
            if len(sentence) >= policy.bounded_from:
                room = policy.max_length - len(sentence) - 1
                candidates = [word for word in words if len(word) <= room]
                if not candidates:
                    raise GenerationError(
                        f"no word fits in the remaining {room} characters "
                        f"(sentence length {len(sentence)})"
                    )
                word = self._rng.choice(candidates)
            else:
                word = self._rng.choice(words)
            sentence = f"{sentence} {word}" if sentence else word

        if len(sentence) > policy.max_length:
            raise GenerationError(
                f"sentence overshot to {len(sentence)} characters "
                f"(max {policy.max_length})"
            )
        logger.debug("Generated sentence of %d characters", len(sentence))
        return sentence
