"""Tests for typespeed.core.settings – YAML settings loading."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from typespeed.core.dictionary import FALLBACK_WORDS, default_dictionary_path
from typespeed.core.sentence import LengthPolicy
from typespeed.core.settings import Settings, default_settings_path, load_settings


def _write(tmp_path: Path, body: str) -> Path:
    f = tmp_path / "settings.yaml"
    f.write_text(textwrap.dedent(body), encoding="utf-8")
    return f


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_missing_file(self, tmp_path: Path):
        assert load_settings(tmp_path / "missing.yaml") == Settings()

    def test_empty_file(self, tmp_path: Path):
        assert load_settings(_write(tmp_path, "")) == Settings()

    def test_default_values(self):
        s = Settings()
        assert s.policy == LengthPolicy(110, 115, 125)
        assert s.max_attempts == 5
        assert s.dictionary_path == default_dictionary_path()
        assert s.fallback_words == FALLBACK_WORDS
        assert s.refresh_ms == 500

    def test_packaged_settings(self):
        s = load_settings(default_settings_path())
        assert s.policy == LengthPolicy()
        assert s.dictionary_path.resolve() == default_dictionary_path()
        assert s.fallback_words == FALLBACK_WORDS


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------

class TestOverrides:
    def test_sentence_policy(self, tmp_path: Path):
        f = _write(tmp_path, """
            sentence:
              bounded_from: 40
              target_length: 45
              max_length: 60
        """)
        assert load_settings(f).policy == LengthPolicy(40, 45, 60)

    def test_partial_sections(self, tmp_path: Path):
        f = _write(tmp_path, """
            generation:
              max_attempts: 9
        """)
        s = load_settings(f)
        assert s.max_attempts == 9
        assert s.policy == LengthPolicy()

    def test_relative_dictionary_path(self, tmp_path: Path):
        f = _write(tmp_path, """
            dictionary:
              path: words/list.txt
        """)
        assert load_settings(f).dictionary_path == tmp_path / "words" / "list.txt"

    def test_absolute_dictionary_path(self, tmp_path: Path):
        target = tmp_path / "elsewhere.txt"
        f = _write(tmp_path, f"""
            dictionary:
              path: {target}
        """)
        assert load_settings(f).dictionary_path == target

    def test_fallback_words(self, tmp_path: Path):
        f = _write(tmp_path, """
            dictionary:
              fallback: [one, two, three, four, five]
        """)
        assert load_settings(f).fallback_words == ("one", "two", "three", "four", "five")

    def test_refresh(self, tmp_path: Path):
        f = _write(tmp_path, """
            ui:
              refresh_ms: 250
        """)
        assert load_settings(f).refresh_ms == 250


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:
    def test_not_a_mapping(self, tmp_path: Path):
        with pytest.raises(ValueError):
            load_settings(_write(tmp_path, "- a\n- b\n"))

    def test_section_not_a_mapping(self, tmp_path: Path):
        with pytest.raises(ValueError, match="sentence"):
            load_settings(_write(tmp_path, "sentence: 5\n"))

    def test_non_integer_length(self, tmp_path: Path):
        f = _write(tmp_path, """
            sentence:
              max_length: lots
        """)
        with pytest.raises(ValueError, match="sentence.max_length"):
            load_settings(f)

    def test_negative_attempts(self, tmp_path: Path):
        f = _write(tmp_path, """
            generation:
              max_attempts: -1
        """)
        with pytest.raises(ValueError, match="generation.max_attempts"):
            load_settings(f)

    def test_bool_is_not_an_integer(self, tmp_path: Path):
        f = _write(tmp_path, """
            ui:
              refresh_ms: true
        """)
        with pytest.raises(ValueError, match="ui.refresh_ms"):
            load_settings(f)

    def test_bounded_from_above_target(self, tmp_path: Path):
        f = _write(tmp_path, """
            sentence:
              bounded_from: 120
        """)
        with pytest.raises(ValueError, match="bounded_from"):
            load_settings(f)

    def test_target_above_max(self, tmp_path: Path):
        f = _write(tmp_path, """
            sentence:
              max_length: 112
        """)
        with pytest.raises(ValueError, match="target_length"):
            load_settings(f)

    def test_short_fallback(self, tmp_path: Path):
        f = _write(tmp_path, """
            dictionary:
              fallback: [one, two]
        """)
        with pytest.raises(ValueError, match="dictionary.fallback"):
            load_settings(f)

    def test_fallback_not_a_list(self, tmp_path: Path):
        f = _write(tmp_path, """
            dictionary:
              fallback: apple
        """)
        with pytest.raises(ValueError, match="dictionary.fallback"):
            load_settings(f)
