"""API router composition."""

from __future__ import annotations

from fastapi import APIRouter, status

from src.analysis.schema import StoredString
from src.api import handlers
from src.api.errors import HTTP_422_UNPROCESSABLE
from src.api.schemas import ErrorResponse, NaturalLanguageResponse, StringListResponse

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    HTTP_422_UNPROCESSABLE: {"model": ErrorResponse},
}

router = APIRouter()
router.add_api_route("/", handlers.root, methods=["GET"])
router.add_api_route("/health", handlers.health, methods=["GET"])
router.add_api_route(
    "/strings",
    handlers.create_string,
    methods=["POST"],
    status_code=status.HTTP_201_CREATED,
    response_model=StoredString,
    responses=_ERRORS,
)
router.add_api_route(
    "/strings",
    handlers.list_strings,
    methods=["GET"],
    response_model=StringListResponse,
    responses=_ERRORS,
)
# Must be registered before `/strings/{string_value}`.
router.add_api_route(
    "/strings/filter-by-natural-language",
    handlers.filter_by_natural_language,
    methods=["GET"],
    response_model=NaturalLanguageResponse,
    responses=_ERRORS,
)
router.add_api_route(
    "/strings/{string_value}",
    handlers.get_string,
    methods=["GET"],
    response_model=StoredString,
    responses=_ERRORS,
)
router.add_api_route(
    "/strings/{string_value}",
    handlers.delete_string,
    methods=["DELETE"],
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERRORS,
)
