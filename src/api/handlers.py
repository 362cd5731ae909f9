"""FastAPI request handlers.

Handlers translate core results into the JSON contract: store and parser errors become `ApiError`
with a fixed status code; anything unexpected is left to the global 500 handler.
"""

from __future__ import annotations

import logging
import re
from time import monotonic
from typing import Annotated, Literal

from fastapi import Depends, Query, Request, Response, status
from pydantic import ValidationError

from src.analysis.schema import StoredString
from src.api.errors import BAD_REQUEST, HTTP_422_UNPROCESSABLE, INVALID_BODY, ApiError
from src.api.schemas import (
    CreateStringRequest,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringListResponse,
)
from src.app import App
from src.query.rules_parser import ParseConflict, parse_query_with_matches
from src.query.schema import filters_from_obj
from src.store.filters import apply_filters
from src.store.memory import DuplicateStringError, StringNotFoundError

logger = logging.getLogger(__name__)
_LETTER_RE = re.compile(r"[a-z]")

NOT_FOUND = "String does not exist in the system"
INVALID_TEXT = "Unprocessable Entity: 'value' must be valid Unicode text"


def get_app(request: Request) -> App:
    return request.app.state.container


AppDep = Annotated[App, Depends(get_app)]


def _latency_ms(started: float) -> int:
    return int((monotonic() - started) * 1000)


def _is_utf8_encodable(value: str) -> bool:
    # Lone surrogates decode from JSON but cannot be encoded back to it.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


async def root() -> dict[str, str]:
    return {"message": "String Analyzer Service is running"}


async def health() -> dict[str, str]:
    return {"status": "ok"}


async def create_string(payload: CreateStringRequest, app: AppDep) -> StoredString:
    """Analyze and store a string; 409 if the same text is already stored."""

    started = monotonic()
    if not payload.value:
        raise ApiError(status.HTTP_400_BAD_REQUEST, INVALID_BODY)
    if not _is_utf8_encodable(payload.value):
        raise ApiError(HTTP_422_UNPROCESSABLE, INVALID_TEXT)

    try:
        entry = await app.store.add(payload.value)
    except DuplicateStringError as exc:
        logger.info("duplicate id=%s latency_ms=%d", exc, _latency_ms(started))
        raise ApiError(
            status.HTTP_409_CONFLICT, "Conflict: String already exists in the system"
        ) from exc

    logger.info("created id=%s latency_ms=%d", entry.id, _latency_ms(started))
    return entry


async def get_string(string_value: str, app: AppDep) -> StoredString:
    try:
        return await app.store.get(string_value)
    except StringNotFoundError as exc:
        raise ApiError(status.HTTP_404_NOT_FOUND, NOT_FOUND) from exc


async def delete_string(string_value: str, app: AppDep) -> Response:
    try:
        await app.store.delete(string_value)
    except StringNotFoundError as exc:
        raise ApiError(status.HTTP_404_NOT_FOUND, NOT_FOUND) from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _normalize_character(value: str | None) -> str | None:
    """Lower-case `contains_character` and require a single `a-z` letter."""

    if value is None:
        return None
    character = value.lower()
    if not _LETTER_RE.fullmatch(character):
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            BAD_REQUEST,
            "contains_character must be a single lowercase letter (a-z)",
        )
    return character


async def list_strings(
        app: AppDep,
        is_palindrome: Annotated[Literal["true", "false"] | None, Query()] = None,
        min_length: Annotated[int | None, Query(ge=0)] = None,
        max_length: Annotated[int | None, Query(ge=0)] = None,
        word_count: Annotated[int | None, Query(ge=0)] = None,
        contains_character: Annotated[str | None, Query()] = None,
) -> StringListResponse:
    """List stored strings matching the explicit filter parameters."""

    try:
        filters = filters_from_obj(
            {
                "is_palindrome": None if is_palindrome is None else is_palindrome == "true",
                "min_length": min_length,
                "max_length": max_length,
                "word_count": word_count,
                "contains_character": _normalize_character(contains_character),
            }
        )
    except ValidationError as exc:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            BAD_REQUEST,
            "min_length cannot be greater than max_length",
        ) from exc

    data = apply_filters(await app.store.list_all(), filters)
    return StringListResponse(data=data, count=len(data), filters_applied=filters.as_dict())


async def filter_by_natural_language(
        app: AppDep,
        query: Annotated[str | None, Query()] = None,
) -> NaturalLanguageResponse:
    """List stored strings matching a free-text query ("palindromes longer than 3 characters")."""

    started = monotonic()
    if query is None or not query.strip():
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Bad Request: Missing or empty query parameter")

    try:
        result = parse_query_with_matches(query)
    except ParseConflict as exc:
        logger.info(
            "conflict min_length=%d max_length=%d latency_ms=%d",
            exc.min_length,
            exc.max_length,
            _latency_ms(started),
        )
        raise ApiError(
            HTTP_422_UNPROCESSABLE,
            "Unprocessable Entity: Query parsed but resulted in conflicting filters",
            str(exc),
        ) from exc

    if result.filters.is_empty():
        logger.info("unsupported query latency_ms=%d", _latency_ms(started))
        raise ApiError(
            status.HTTP_400_BAD_REQUEST, "Bad Request: Unable to parse natural language query"
        )

    data = apply_filters(await app.store.list_all(), result.filters)
    logger.info(
        "interpreted rules=%s count=%d latency_ms=%d",
        ",".join(result.matched),
        len(data),
        _latency_ms(started),
    )
    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(
            original=query,
            parsed_filters=result.filters.as_dict(),
        ),
    )
