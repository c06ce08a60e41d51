"""Tests for typespeed.core.dictionary – word list loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from typespeed.core.dictionary import (
    FALLBACK_WORDS,
    default_dictionary_path,
    load_dictionary,
    load_dictionary_or_fallback,
)


class TestLoadDictionary:
    def test_one_word_per_line(self, tmp_path: Path):
        f = tmp_path / "words.txt"
        f.write_text("apple\nbanana\n\n  cherry  \n", encoding="utf-8")
        assert load_dictionary(f) == ["apple", "banana", "cherry"]

    def test_keeps_duplicates_and_order(self, tmp_path: Path):
        f = tmp_path / "words.txt"
        f.write_text("b\na\nb\n", encoding="utf-8")
        assert load_dictionary(f) == ["b", "a", "b"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_dictionary(tmp_path / "nope.txt")

    def test_empty_file(self, tmp_path: Path):
        f = tmp_path / "words.txt"
        f.write_text("\n\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_dictionary(f)

    def test_packaged_dictionary(self):
        words = load_dictionary(default_dictionary_path())
        assert len(words) > 100
        assert all(w and " " not in w for w in words)


class TestFallback:
    def test_fallback_has_five_words(self):
        assert len(FALLBACK_WORDS) >= 5

    def test_uses_file_when_present(self, tmp_path: Path):
        f = tmp_path / "words.txt"
        f.write_text("one\ntwo\n", encoding="utf-8")
        assert load_dictionary_or_fallback(f) == ["one", "two"]

    def test_missing_file_uses_fallback(self, tmp_path: Path, caplog):
        with caplog.at_level(logging.WARNING, logger="typespeed.core.dictionary"):
            words = load_dictionary_or_fallback(tmp_path / "nope.txt")
        assert words == list(FALLBACK_WORDS)
        assert "Could not load dictionary" in caplog.text

    def test_custom_fallback(self, tmp_path: Path):
        words = load_dictionary_or_fallback(tmp_path / "nope.txt", ["v", "w", "x", "y", "z"])
        assert words == ["v", "w", "x", "y", "z"]

    def test_undecodable_file_uses_fallback(self, tmp_path: Path):
        f = tmp_path / "words.txt"
        f.write_bytes(b"\xff\xfe\xfa")
        assert load_dictionary_or_fallback(f) == list(FALLBACK_WORDS)
