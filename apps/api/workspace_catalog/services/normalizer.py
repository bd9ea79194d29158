"""Reshape raw listing rows into the presentation contract."""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, Union

from pydantic import ValidationError

from ..repositories.catalog import RawListing
from ..schemas.catalog import LocationSummary, PresentationListing


class DataIntegrityError(ValueError):
    """Raised when a stored listing cannot be shown as-is."""


@dataclass(slots=True, frozen=True)
class KeptAmenity:
    value: str


@dataclass(slots=True, frozen=True)
class DiscardedAmenity:
    raw: object


AmenityCheck = Union[KeptAmenity, DiscardedAmenity]


def narrow_amenity(item: object) -> AmenityCheck:
    """Classify one element of the stored amenities array."""

    if isinstance(item, str):
        return KeptAmenity(item)
    return DiscardedAmenity(item)


def filter_amenities(raw: object) -> list[str]:
    """Keep the string elements of ``raw``; anything that is not a list yields ``[]``."""

    if not isinstance(raw, (list, tuple)):
        return []

    kept: list[str] = []
    for item in raw:
        check = narrow_amenity(item)
        if isinstance(check, KeptAmenity):
            kept.append(check.value)
    return kept


def coerce_price(raw: object) -> float:
    """Convert a stored price to a finite float.

    Accepts ints, floats, decimals and numeric strings. ``None``, booleans, blank
    or unparsable strings and non-finite values raise ``DataIntegrityError``.
    """

    if raw is None or isinstance(raw, bool):
        raise DataIntegrityError(f"price {raw!r} is not numeric")

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise DataIntegrityError("price is blank")
        try:
            raw = Decimal(text)
        except InvalidOperation as exc:
            raise DataIntegrityError(f"price {text!r} is not numeric") from exc

    if not isinstance(raw, (int, float, Decimal)):
        raise DataIntegrityError(f"price of type {type(raw).__name__} is not numeric")

    try:
        value = float(raw)
    except (OverflowError, ValueError) as exc:
        raise DataIntegrityError(f"price {raw!r} is not representable") from exc

    if not math.isfinite(value):
        raise DataIntegrityError(f"price {raw!r} is not finite")
    return value


def normalise_listing(record: RawListing) -> PresentationListing:
    """Produce the presentation shape for one listing or raise ``DataIntegrityError``."""

    if record.is_active is not True:
        raise DataIntegrityError(f"listing {record.id!r} is not active")

    location = record.location
    if location is None:
        raise DataIntegrityError(f"listing {record.id!r} has no location")

    price = coerce_price(record.price_per_month)

    try:
        return PresentationListing(
            id=record.id,
            name=record.name,
            type=record.type,
            capacity=record.capacity,
            price_per_month=price,
            description=record.description or "",
            image_url=record.image_url or "",
            amenities=filter_amenities(record.amenities),
            location=LocationSummary(
                name=location.name,
                city=location.city,
                address=location.address,
            ),
        )
    except ValidationError as exc:
        raise DataIntegrityError(f"listing {record.id!r} failed validation: {exc}") from exc


def normalise_many(records: Iterable[RawListing]) -> tuple[list[PresentationListing], list[tuple[RawListing, DataIntegrityError]]]:
    """Normalise records in order, separating valid listings from rejected ones."""

    listings: list[PresentationListing] = []
    rejected: list[tuple[RawListing, DataIntegrityError]] = []
    for record in records:
        try:
            listings.append(normalise_listing(record))
        except DataIntegrityError as exc:
            rejected.append((record, exc))
    return listings, rejected
