"""Text normalization for deterministic query parsing."""

from __future__ import annotations


def normalize_text(text: str) -> str:
    """Normalize user text for rules-based parsing.

    Only lowercases and trims. Inner spacing and punctuation are kept so the phrase patterns see
    the text as typed.
    """

    return (text or "").strip().lower()
