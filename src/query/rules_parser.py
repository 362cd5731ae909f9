"""Rules-based English query parser.

This parser is a best-effort lexical extractor:
    - it recognizes a fixed set of phrases and ignores everything else,
    - rules run in a fixed order and a later match overwrites the field set by an earlier one,
    - the only failure is a length range that cannot be satisfied (`ParseConflict`).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from src.query.dictionaries import (
    LENGTH_BOUNDS,
    LengthBound,
    detect_word_count_phrase,
    length_bound_pattern,
)
from src.query.normalize import normalize_text
from src.query.schema import FilterField, FilterSet


class ParseConflict(ValueError):
    """Raised when the parsed query yields `min_length > max_length`."""

    def __init__(self, min_length: int, max_length: int) -> None:
        super().__init__("Conflicting length constraints")
        self.min_length = min_length
        self.max_length = max_length


Extractor = Callable[[str], Any]


@dataclass(frozen=True)
class _Rule:
    name: str
    field: FilterField
    # Returns the field value, or None when the rule does not match.
    extract: Extractor
    # Skip this rule if any of the named rules already matched.
    unless: tuple[str, ...] = ()


@dataclass(frozen=True)
class ParseResult:
    """Parsed filters plus the names of the rules that matched, in order."""

    filters: FilterSet
    matched: tuple[str, ...] = ()


def _regex_extractor(
        pattern: re.Pattern[str],
        transform: Callable[[re.Match[str]], Any],
) -> Extractor:
    def _extract(text: str) -> Any:
        match = pattern.search(text)
        if not match:
            return None
        return transform(match)

    return _extract


def _substring_extractor(needle: str, value: Any) -> Extractor:
    return lambda text: value if needle in text else None


def _length_rule(name: str, bound: LengthBound) -> _Rule:
    spec = LENGTH_BOUNDS[bound]
    return _Rule(
        name=name,
        field=spec.field,
        extract=_regex_extractor(
            length_bound_pattern(bound),
            lambda m: int(m.group("n")) + spec.offset,
        ),
    )


_WORD_COUNT_RE = re.compile(r"(?P<n>[0-9]+)\s+words?")
_CONTAINS_LETTER_RE = re.compile(r"contain(?:ing)?\s+(?:the\s+)?letter\s+(?P<ch>[a-z])")
_CONTAINING_CHAR_RE = re.compile(r"containing\s+(?P<ch>[a-z])(?:\s|$)")

# Order matters: later rules overwrite fields written by earlier ones.
_RULES: tuple[_Rule, ...] = (
    _Rule("word_count_phrase", FilterField.word_count, detect_word_count_phrase),
    _Rule(
        "word_count_number",
        FilterField.word_count,
        _regex_extractor(_WORD_COUNT_RE, lambda m: int(m.group("n"))),
    ),
    _Rule("palindrome", FilterField.is_palindrome, _substring_extractor("palindrom", True)),
    _length_rule("longer_than", LengthBound.exclusive_min),
    _length_rule("shorter_than", LengthBound.exclusive_max),
    _length_rule("at_least", LengthBound.inclusive_min),
    _length_rule("at_most", LengthBound.inclusive_max),
    _Rule(
        "contains_letter",
        FilterField.contains_character,
        _regex_extractor(_CONTAINS_LETTER_RE, lambda m: m.group("ch")),
    ),
    # Covers "first vowel" too; always 'a', not a real vowel search.
    _Rule("vowel", FilterField.contains_character, _substring_extractor("vowel", "a")),
    _Rule(
        "containing_character",
        FilterField.contains_character,
        _regex_extractor(_CONTAINING_CHAR_RE, lambda m: m.group("ch")),
        unless=("contains_letter",),
    ),
)


def _apply_rules(text: str) -> tuple[dict[str, Any], list[str]]:
    values: dict[str, Any] = {}
    matched: list[str] = []

    for rule in _RULES:
        if any(name in matched for name in rule.unless):
            continue
        value = rule.extract(text)
        if value is None:
            continue
        values[rule.field] = value
        matched.append(rule.name)

    return values, matched


def parse_query_with_matches(text: str) -> ParseResult:
    """Parse free text into a FilterSet and report which rules fired.

    Raises:
        ParseConflict: If the derived `min_length` exceeds the derived `max_length`.
    """

    values, matched = _apply_rules(normalize_text(text))

    min_length = values.get(FilterField.min_length)
    max_length = values.get(FilterField.max_length)
    if min_length is not None and max_length is not None and min_length > max_length:
        raise ParseConflict(min_length, max_length)

    return ParseResult(
        filters=FilterSet(**{str(k): v for k, v in values.items()}),
        matched=tuple(matched),
    )


def parse_query(text: str) -> FilterSet:
    """Parse free text into a FilterSet (may be empty if nothing was recognized)."""

    return parse_query_with_matches(text).filters
