"""Catalog loading for the landing view."""
from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.space import SpaceType
from ..repositories import catalog as catalog_repo
from ..repositories.catalog import RawLocation
from ..schemas import catalog as schemas
from .normalizer import normalise_many

FEATURED_LIMIT = 8
EMPTY_CATALOG_MESSAGE = "No spaces available at the moment."

SPACE_TYPE_LABELS: dict[str, str] = {
    SpaceType.HOTDESK.value: "Hot Desk",
    SpaceType.MEETING_ROOM.value: "Meeting Room",
    SpaceType.PRIVATE_OFFICE.value: "Private Office",
}

logger = logging.getLogger(__name__)


def build_city_directory(locations: Iterable[RawLocation]) -> list[str]:
    """Return the distinct cities of active locations in code-point order."""

    return sorted({location.city for location in locations if location.is_active and location.city})


async def load_city_directory(session: AsyncSession) -> list[str]:
    """Fetch active locations and derive the city directory; failures yield ``[]``."""

    try:
        locations = await catalog_repo.fetch_active_locations(session)
    except Exception:  # noqa: BLE001 - an unreachable store must not break the page
        logger.exception("Failed to load locations for the city directory")
        return []
    return build_city_directory(locations)


async def load_featured_catalog(
    session: AsyncSession,
    *,
    limit: int = FEATURED_LIMIT,
) -> list[schemas.PresentationListing]:
    """Return up to ``limit`` active listings ready for display.

    Records that fail normalisation are dropped individually; a failed fetch
    degrades to an empty catalog.
    """

    try:
        records = await catalog_repo.fetch_active_listings(session, limit=limit)
    except Exception:  # noqa: BLE001 - an unreachable store must not break the page
        logger.exception("Failed to load featured listings")
        return []

    listings, rejected = normalise_many(records[:limit])
    for record, error in rejected:
        logger.warning("Dropping listing %r from featured catalog: %s", record.id, error)
    return listings


def format_space_type(value: str) -> str:
    """Human label for a space type, e.g. ``meeting_room`` -> ``Meeting Room``."""

    label = SPACE_TYPE_LABELS.get(value)
    if label:
        return label
    return " ".join(word[:1].upper() + word[1:] for word in value.split("_"))


def space_type_options() -> list[schemas.SpaceTypeOption]:
    """Options offered by the workspace-type filter."""

    return [schemas.SpaceTypeOption(value=item.value, label=format_space_type(item.value)) for item in SpaceType]


def empty_message_for(listings: list[schemas.PresentationListing]) -> str | None:
    return EMPTY_CATALOG_MESSAGE if not listings else None
