"""Tests for the deterministic rules-based English query parser."""

from __future__ import annotations

import pytest

from src.query.rules_parser import ParseConflict, parse_query, parse_query_with_matches
from src.query.schema import FilterSet


def test_parse_single_word_palindromes() -> None:
    filters = parse_query("all single word palindromic strings")
    assert filters == FilterSet(word_count=1, is_palindrome=True)


def test_parse_literal_word_count_phrases() -> None:
    assert parse_query("two word strings").word_count == 2
    assert parse_query("three words strings").word_count == 3


def test_literal_phrase_priority_is_fixed() -> None:
    # "single word" is checked first regardless of position in the text.
    assert parse_query("two word or single word").word_count == 1


def test_numeric_word_count_overwrites_literal_phrase() -> None:
    filters = parse_query("two word palindrome with 5 words")
    assert filters.word_count == 5
    assert filters.is_palindrome is True


def test_numeric_word_count_singular() -> None:
    assert parse_query("strings of 1 word").word_count == 1


def test_palindrome_substring_variants() -> None:
    assert parse_query("palindromes").is_palindrome is True
    assert parse_query("palindromic").is_palindrome is True
    assert parse_query("not palindrome").is_palindrome is True


def test_parse_longer_than() -> None:
    filters = parse_query("strings longer than 10 characters")
    assert filters.min_length == 11
    assert filters.max_length is None


def test_parse_more_than_singular_character() -> None:
    assert parse_query("more than 1 character").min_length == 2


def test_parse_shorter_and_less_than() -> None:
    assert parse_query("shorter than 10 characters").max_length == 9
    assert parse_query("less than 3 characters").max_length == 2


def test_parse_inclusive_bounds() -> None:
    assert parse_query("at least 5 characters").min_length == 5
    assert parse_query("at most 20 characters").max_length == 20
    assert parse_query("maximum 7 characters").max_length == 7


def test_length_phrase_requires_characters_word() -> None:
    assert parse_query("longer than 10").is_empty()


def test_later_length_rule_overwrites_earlier() -> None:
    filters = parse_query("longer than 10 characters and at least 3 characters")
    assert filters.min_length == 3


def test_equal_bounds_are_not_a_conflict() -> None:
    filters = parse_query("at least 5 characters and at most 5 characters")
    assert filters.min_length == 5
    assert filters.max_length == 5


def test_conflicting_length_bounds_raise() -> None:
    with pytest.raises(ParseConflict) as excinfo:
        parse_query("longer than 20 characters and shorter than 5 characters")
    assert excinfo.value.min_length == 21
    assert excinfo.value.max_length == 4


def test_parse_conflict_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_query("at least 10 characters, at most 2 characters")


def test_parse_contains_the_letter() -> None:
    assert parse_query("strings containing the letter z").contains_character == "z"
    assert parse_query("strings that contain letter q").contains_character == "q"
    assert parse_query("CONTAINING THE LETTER Z").contains_character == "z"


def test_strict_letter_pattern_wins_over_loose_pattern() -> None:
    filters = parse_query("containing the letter z or containing q")
    assert filters.contains_character == "z"


def test_loose_containing_pattern_alone() -> None:
    assert parse_query("strings containing x").contains_character == "x"
    assert parse_query("strings containing x and more").contains_character == "x"


def test_loose_containing_pattern_needs_single_letter() -> None:
    assert parse_query("strings containing xyz").is_empty()


def test_vowel_hint_is_always_a() -> None:
    assert parse_query("strings containing the first vowel").contains_character == "a"
    assert parse_query("has a vowel").contains_character == "a"


def test_vowel_hint_overwrites_letter_pattern() -> None:
    assert parse_query("containing the letter z and a vowel").contains_character == "a"


def test_loose_pattern_overwrites_vowel_hint() -> None:
    assert parse_query("vowel strings containing q").contains_character == "q"


def test_unrecognized_text_yields_empty_filters() -> None:
    assert parse_query("banana") == FilterSet()
    assert parse_query("").is_empty()
    assert parse_query("   ").is_empty()


def test_query_is_case_insensitive_and_trimmed() -> None:
    filters = parse_query("  PALINDROMES LONGER THAN 3 CHARACTERS  ")
    assert filters == FilterSet(is_palindrome=True, min_length=4)


def test_matched_rules_are_reported_in_order() -> None:
    result = parse_query_with_matches("two word palindrome with 5 words longer than 2 characters")
    assert result.matched == (
        "word_count_phrase",
        "word_count_number",
        "palindrome",
        "longer_than",
    )
    assert result.filters.as_dict() == {
        "word_count": 5,
        "is_palindrome": True,
        "min_length": 3,
    }


@pytest.mark.parametrize(
    "query",
    ["longer than ٣ characters", "at most ５ characters", "５ words", "strings of ٢ words"],
)
def test_non_ascii_digits_are_not_numbers(query: str) -> None:
    assert parse_query(query).is_empty()
