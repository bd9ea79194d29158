"""Search submission endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from ..schemas import search as search_schema
from ..services.search import build_search_path

router = APIRouter()


def filter_criteria(
    city: str | None = None,
    type_: str | None = Query(default=None, alias="type"),
    capacity: str | None = None,
) -> search_schema.FilterCriteria:
    """Validate raw form values; blank values are treated as unset."""

    try:
        return search_schema.FilterCriteria(city=city, type=type_, capacity=capacity)
    except ValidationError as exc:
        errors = [
            {**error, "loc": ("query", *error["loc"])}
            for error in exc.errors(include_url=False)
        ]
        raise RequestValidationError(errors) from exc


@router.get("/api/search/path", response_model=search_schema.SearchPathResponse)
async def search_path(
    criteria: search_schema.FilterCriteria = Depends(filter_criteria),
) -> search_schema.SearchPathResponse:
    """Return the canonical results path for the submitted filters."""

    return search_schema.SearchPathResponse(path=build_search_path(criteria))


@router.get("/search", include_in_schema=False)
async def search_redirect(
    criteria: search_schema.FilterCriteria = Depends(filter_criteria),
) -> RedirectResponse:
    """Send a submitted search form on to the results view."""

    return RedirectResponse(build_search_path(criteria), status_code=status.HTTP_303_SEE_OTHER)
