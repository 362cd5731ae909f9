"""String analyzer.

`analyze` is total: every string, including the empty one, yields a valid `PropertyRecord`.
The fingerprint is computed over the raw text so identical input always maps to the same key.
"""

from __future__ import annotations

import hashlib
import re
from collections import Counter

from src.analysis.schema import PropertyRecord

_WHITESPACE_RE = re.compile(r"\s+")


def fingerprint(text: str) -> str:
    """Return the hex SHA-256 digest of the raw UTF-8 bytes of `text`."""

    # Lone surrogates are valid in a decoded JSON string; keep them hashable.
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()


def _normalize(text: str) -> str:
    # Lowercase, then drop every whitespace character (not only ' ').
    return _WHITESPACE_RE.sub("", text.lower())


def _word_count(text: str) -> int:
    trimmed = text.strip()
    if not trimmed:
        return 0
    return len(_WHITESPACE_RE.split(trimmed))


def _character_frequency(text: str) -> dict[str, int]:
    # Case-sensitive; only the literal space is skipped.
    return dict(Counter(ch for ch in text if ch != " "))


def analyze(text: str) -> PropertyRecord:
    """Compute the property record of `text`."""

    normalized = _normalize(text)

    return PropertyRecord(
        length=len(text),
        is_palindrome=normalized == normalized[::-1],
        unique_characters=len(set(normalized)),
        word_count=_word_count(text),
        fingerprint=fingerprint(text),
        character_frequency_map=_character_frequency(text),
    )
