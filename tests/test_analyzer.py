"""Tests for the string analyzer (property record and fingerprint)."""

from __future__ import annotations

import hashlib

import pytest

from src.analysis.analyzer import analyze, fingerprint


def test_analyze_is_deterministic() -> None:
    for text in ("", "hello", "Race car", "a  b   c", "ünïcödé ✓"):
        assert analyze(text) == analyze(text)


def test_fingerprint_is_sha256_of_raw_text() -> None:
    record = analyze("Hello World")
    assert record.fingerprint == hashlib.sha256(b"Hello World").hexdigest()
    assert len(record.fingerprint) == 64
    assert record.fingerprint == record.fingerprint.lower()


def test_fingerprints_are_distinct_across_corpus() -> None:
    corpus = ["", " ", "a", "A", "a ", " a", "ab", "ba", "racecar", "Racecar", "hello world"]
    fingerprints = {analyze(text).fingerprint for text in corpus}
    assert len(fingerprints) == len(corpus)


def test_fingerprint_is_not_normalized() -> None:
    assert fingerprint("Hello") != fingerprint("hello")
    assert fingerprint("hello") != fingerprint(" hello")


def test_palindrome_ignores_case_and_whitespace() -> None:
    assert analyze("Race car").is_palindrome is True
    assert analyze("Never odd or even").is_palindrome is True
    assert analyze("a\tb\nC").is_palindrome is False
    assert analyze("ab\t\nBA").is_palindrome is True
    assert analyze("hello").is_palindrome is False


def test_empty_string_is_a_palindrome() -> None:
    record = analyze("")
    assert record.length == 0
    assert record.is_palindrome is True
    assert record.unique_characters == 0
    assert record.word_count == 0
    assert record.character_frequency_map == {}


def test_length_counts_raw_characters() -> None:
    assert analyze("a b").length == 3
    assert analyze("  ").length == 2
    # Code points, not bytes.
    assert analyze("é✓").length == 2


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("   ", 0),
        ("\t\n", 0),
        ("word", 1),
        ("a  b   c", 3),
        ("  leading and trailing  ", 3),
        ("tabs\tand\nnewlines", 3),
    ],
)
def test_word_count(text: str, expected: int) -> None:
    assert analyze(text).word_count == expected


def test_unique_characters_use_normalized_form() -> None:
    # "Aa B" -> "aab" -> {a, b}
    assert analyze("Aa B").unique_characters == 2
    assert analyze("hello world").unique_characters == 7


def test_frequency_map_excludes_spaces_only() -> None:
    assert analyze("a a").character_frequency_map == {"a": 2}
    assert analyze("a\ta").character_frequency_map == {"a": 2, "\t": 1}


def test_frequency_map_is_case_sensitive() -> None:
    assert analyze("Aab").character_frequency_map == {"A": 1, "a": 1, "b": 1}


def test_property_record_serializes_fingerprint_as_sha256_hash() -> None:
    dumped = analyze("abc").model_dump(by_alias=True)
    assert "sha256_hash" in dumped
    assert "fingerprint" not in dumped
    assert dumped["sha256_hash"] == hashlib.sha256(b"abc").hexdigest()


def test_lone_surrogate_is_hashable() -> None:
    record = analyze("\ud800")
    assert record.length == 1
    assert len(record.fingerprint) == 64
