from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, Union

logger = logging.getLogger(__name__)

FALLBACK_WORDS = ("apple", "banana", "cherry", "date", "elderberry")


def default_dictionary_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "dictionary.txt"


def load_dictionary(path: Union[str, Path]) -> List[str]:
    """Read a word list, one word per line. Blank lines are skipped."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    text = path.read_text(encoding="utf-8")
    words = [line.strip() for line in text.splitlines() if line.strip()]
    if not words:
        raise ValueError(f"{path.name}: dictionary has no words")
    return words


def load_dictionary_or_fallback(
    path: Union[str, Path],
    fallback: Sequence[str] = FALLBACK_WORDS,
) -> List[str]:
    try:
        words = load_dictionary(path)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.warning("Could not load dictionary from %s: %s; using %d fallback words", path, e, len(fallback))
        return list(fallback)
    logger.info("Loaded %d words from %s", len(words), path)
    return words
