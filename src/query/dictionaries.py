"""English phrase dictionaries for word-count and length constraints.

These mappings are used by the rules-based parser and should remain small and deterministic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from src.query.schema import FilterField

# Checked in this order; the first phrase present wins.
WORD_COUNT_PHRASES: tuple[tuple[str, int], ...] = (
    ("single word", 1),
    ("two word", 2),
    ("three word", 3),
)


class LengthBound(StrEnum):
    """How a length phrase maps onto the inclusive `min_length` / `max_length` bounds."""

    exclusive_min = "exclusive_min"
    exclusive_max = "exclusive_max"
    inclusive_min = "inclusive_min"
    inclusive_max = "inclusive_max"


LENGTH_BOUND_SYNONYMS: dict[LengthBound, tuple[str, ...]] = {
    LengthBound.exclusive_min: ("longer than", "more than"),
    LengthBound.exclusive_max: ("shorter than", "less than"),
    LengthBound.inclusive_min: ("at least",),
    LengthBound.inclusive_max: ("at most", "maximum"),
}


@dataclass(frozen=True)
class LengthBoundSpec:
    """Target field and the offset turning the phrase value into an inclusive bound."""

    field: FilterField
    offset: int


LENGTH_BOUNDS: dict[LengthBound, LengthBoundSpec] = {
    LengthBound.exclusive_min: LengthBoundSpec(field=FilterField.min_length, offset=1),
    LengthBound.exclusive_max: LengthBoundSpec(field=FilterField.max_length, offset=-1),
    LengthBound.inclusive_min: LengthBoundSpec(field=FilterField.min_length, offset=0),
    LengthBound.inclusive_max: LengthBoundSpec(field=FilterField.max_length, offset=0),
}


def phrase_pattern(phrase: str) -> str:
    """Regex for a multi-word phrase tolerating any run of whitespace between words."""

    return r"\s+".join(re.escape(word) for word in phrase.split())


def length_bound_pattern(bound: LengthBound) -> re.Pattern[str]:
    """Compile `<phrase> <N> character(s)` for every synonym of `bound`."""

    # Sort by length desc to prefer longer phrases.
    phrases = sorted(LENGTH_BOUND_SYNONYMS[bound], key=lambda p: (-len(p), p))
    alternation = "|".join(phrase_pattern(p) for p in phrases)
    return re.compile(rf"(?:{alternation})\s+(?P<n>[0-9]+)\s+characters?")


def detect_word_count_phrase(text: str) -> int | None:
    """Return the word count of the first literal phrase found in `text`, if any."""

    for phrase, count in WORD_COUNT_PHRASES:
        if phrase in text:
            return count
    return None
