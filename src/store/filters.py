"""Deterministic filter engine.

The engine converts a validated `FilterSet` into a list of predicates over stored records and keeps
only the records that satisfy all of them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from src.analysis.schema import StoredString
from src.query.schema import FilterSet

Predicate = Callable[[StoredString], bool]


def build_predicates(filters: FilterSet) -> list[Predicate]:
    """Build one predicate per present constraint (combined with AND by the caller)."""

    predicates: list[Predicate] = []

    if filters.is_palindrome is not None:
        wanted = filters.is_palindrome
        predicates.append(lambda s: s.properties.is_palindrome == wanted)

    if filters.min_length is not None:
        min_length = filters.min_length
        predicates.append(lambda s: s.properties.length >= min_length)

    if filters.max_length is not None:
        max_length = filters.max_length
        predicates.append(lambda s: s.properties.length <= max_length)

    if filters.word_count is not None:
        word_count = filters.word_count
        predicates.append(lambda s: s.properties.word_count == word_count)

    if filters.contains_character is not None:
        # Frequency map keys are case-sensitive.
        character = filters.contains_character
        predicates.append(lambda s: character in s.properties.character_frequency_map)

    return predicates


def apply_filters(records: Iterable[StoredString], filters: FilterSet) -> list[StoredString]:
    """Return the records matching every constraint in `filters`, preserving input order."""

    predicates = build_predicates(filters)
    return [r for r in records if all(p(r) for p in predicates)]
