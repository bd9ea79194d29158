"""Canonical navigation targets for search submissions."""
from __future__ import annotations

from urllib.parse import urlencode

from ..core.config import settings
from ..schemas.search import FilterCriteria


def build_search_path(criteria: FilterCriteria, base_path: str | None = None) -> str:
    """Serialise filters into the results-page path.

    Parameters appear as ``city``, ``type``, ``capacity`` in that order and only
    when set. With no filters the bare path is returned.
    """

    path = base_path or settings.search_results_path

    params: list[tuple[str, str]] = []
    if criteria.city:
        params.append(("city", criteria.city))
    if criteria.type:
        params.append(("type", criteria.type.value))
    if criteria.capacity is not None:
        params.append(("capacity", str(criteria.capacity)))

    query = urlencode(params)
    return f"{path}?{query}" if query else path


def city_shortcut_path(city: str) -> str:
    """Results path filtered to a single city."""

    return build_search_path(FilterCriteria(city=city))
