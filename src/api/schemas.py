"""Request/response models of the HTTP API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr

from src.analysis.schema import StoredString


class CreateStringRequest(BaseModel):
    """Body of `POST /strings`. `value` must be a JSON string, never coerced."""

    value: StrictStr


class StringListResponse(BaseModel):
    data: list[StoredString]
    count: int
    filters_applied: dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: list[StoredString]
    count: int
    interpreted_query: InterpretedQuery


class ErrorResponse(BaseModel):
    """Error envelope returned for every non-2xx response."""

    model_config = ConfigDict(extra="forbid")

    error: str
    details: str | None = None
