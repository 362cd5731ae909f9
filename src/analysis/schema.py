"""Analysis records (Pydantic models).

`PropertyRecord` is the output contract of the analyzer; `StoredString` is what the store keeps
and what the HTTP API returns.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PropertyRecord(BaseModel):
    """Structural properties derived solely from the input text."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    length: int = Field(ge=0)
    is_palindrome: bool
    unique_characters: int = Field(ge=0)
    word_count: int = Field(ge=0)
    # Exposed as `sha256_hash` on the wire.
    fingerprint: str = Field(
        pattern=r"^[0-9a-f]{64}$",
        alias="sha256_hash",
    )
    character_frequency_map: dict[str, int]


class StoredString(BaseModel):
    """An analyzed string as kept by the store, keyed by its fingerprint."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    value: str
    properties: PropertyRecord
    created_at: datetime
