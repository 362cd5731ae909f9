"""Filter JSON schema (Pydantic models).

`FilterSet` is the contract between the query parsers (natural-language rules or explicit query
parameters) and the filter engine. Every field is optional; an absent field means "no constraint".
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FilterField(StrEnum):
    """Names of the supported filter constraints."""

    is_palindrome = "is_palindrome"
    min_length = "min_length"
    max_length = "max_length"
    word_count = "word_count"
    contains_character = "contains_character"


class FilterSet(BaseModel):
    """A sparse set of constraints combined with logical AND."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_palindrome: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    word_count: int | None = None
    contains_character: str | None = Field(default=None, min_length=1, max_length=1)

    @model_validator(mode="after")
    def validate_length_bounds(self) -> FilterSet:
        """Validate that the inclusive length range is well-formed (`min_length <= max_length`)."""

        if (
                self.min_length is not None
                and self.max_length is not None
                and self.min_length > self.max_length
        ):
            raise ValueError("min_length must be <= max_length")
        return self

    def is_empty(self) -> bool:
        return not self.as_dict()

    def as_dict(self) -> dict[str, Any]:
        """Only the constraints that are present."""

        return self.model_dump(exclude_none=True)


def filters_from_obj(obj: Any) -> FilterSet:
    """Validate and parse a FilterSet from an arbitrary decoded JSON object."""

    return FilterSet.model_validate(obj)
