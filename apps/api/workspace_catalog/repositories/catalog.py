"""Read-only data access for locations and workspace listings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.location import Location
from ..models.space import Space


@dataclass(slots=True)
class RawLocation:
    """Location row as read from the store."""

    id: str
    name: str
    city: str
    address: str
    is_active: bool


@dataclass(slots=True)
class RawListing:
    """Listing row with its joined location, not yet validated for display.

    ``price_per_month`` and ``amenities`` keep whatever the driver returned;
    ``location`` is ``None`` when the reference could not be resolved.
    """

    id: Any
    name: Any
    type: Any
    capacity: Any
    price_per_month: Any
    description: Any
    image_url: Any
    amenities: Any
    is_active: bool
    location: RawLocation | None


async def fetch_active_locations(session: AsyncSession) -> list[RawLocation]:
    """Return every active location in storage order."""

    stmt = select(Location).where(Location.is_active.is_(True))
    result = await session.execute(stmt)
    return [_to_raw_location(location) for location in result.scalars().all()]


async def fetch_active_listings(session: AsyncSession, *, limit: int) -> list[RawListing]:
    """Return at most ``limit`` active listings outer-joined with their location."""

    stmt = (
        select(Space, Location)
        .outerjoin(Location, Space.location_id == Location.id)
        .where(Space.is_active.is_(True))
        .limit(limit)
    )
    rows: Sequence[tuple[Space, Location | None]] = (await session.execute(stmt)).all()

    return [
        RawListing(
            id=space.id,
            name=space.name,
            type=space.type,
            capacity=space.capacity,
            price_per_month=space.price_per_month,
            description=space.description,
            image_url=space.image_url,
            amenities=space.amenities,
            is_active=space.is_active,
            location=_to_raw_location(location) if location is not None else None,
        )
        for space, location in rows
    ]


def _to_raw_location(location: Location) -> RawLocation:
    return RawLocation(
        id=location.id,
        name=location.name,
        city=location.city,
        address=location.address,
        is_active=location.is_active,
    )
