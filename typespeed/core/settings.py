"""Application settings loaded from YAML.

Every key is optional; missing keys take the defaults below. See
``typespeed/data/settings.yaml`` for the shipped file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from typespeed.core.dictionary import FALLBACK_WORDS, default_dictionary_path
from typespeed.core.sentence import LengthPolicy

MIN_FALLBACK_WORDS = 5


def default_settings_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


@dataclass(frozen=True)
class Settings:
    policy: LengthPolicy = field(default_factory=LengthPolicy)
    max_attempts: int = 5
    dictionary_path: Path = field(default_factory=default_dictionary_path)
    fallback_words: Tuple[str, ...] = FALLBACK_WORDS
    refresh_ms: int = 500


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' must be a mapping")
    return value


def _positive_int(section: Dict[str, Any], key: str, default: int, prefix: str) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"'{prefix}.{key}' must be a positive integer, got {value!r}")
    return value


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings from ``path`` (default: the packaged settings file).

    A missing file yields default settings; malformed values raise ValueError.
    """
    path = Path(path) if path is not None else default_settings_path()
    if not path.exists():
        return Settings()

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a YAML mapping")

    defaults = LengthPolicy()
    sentence = _section(raw, "sentence")
    bounded_from = _positive_int(sentence, "bounded_from", defaults.bounded_from, "sentence")
    target_length = _positive_int(sentence, "target_length", defaults.target_length, "sentence")
    max_length = _positive_int(sentence, "max_length", defaults.max_length, "sentence")
    if bounded_from > target_length:
        raise ValueError("'sentence.bounded_from' must not exceed 'sentence.target_length'")
    if target_length > max_length:
        raise ValueError("'sentence.target_length' must not exceed 'sentence.max_length'")

    generation = _section(raw, "generation")
    max_attempts = _positive_int(generation, "max_attempts", 5, "generation")

    dictionary = _section(raw, "dictionary")
    dictionary_path = default_dictionary_path()
    if dictionary.get("path"):
        dictionary_path = Path(str(dictionary["path"]))
        if not dictionary_path.is_absolute():
            dictionary_path = path.parent / dictionary_path
    fallback = dictionary.get("fallback")
    if fallback is None:
        fallback_words = FALLBACK_WORDS
    else:
        if not isinstance(fallback, list):
            raise ValueError("'dictionary.fallback' must be a list of words")
        fallback_words = tuple(str(w).strip() for w in fallback if str(w).strip())
        if len(fallback_words) < MIN_FALLBACK_WORDS:
            raise ValueError(f"'dictionary.fallback' needs at least {MIN_FALLBACK_WORDS} words")

    ui = _section(raw, "ui")
    refresh_ms = _positive_int(ui, "refresh_ms", 500, "ui")

    return Settings(
        policy=LengthPolicy(bounded_from, target_length, max_length),
        max_attempts=max_attempts,
        dictionary_path=dictionary_path,
        fallback_words=fallback_words,
        refresh_ms=refresh_ms,
    )
