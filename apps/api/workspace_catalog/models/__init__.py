"""Expose ORM models."""
from .location import Location
from .space import Space, SpaceType

__all__ = [
    "Location",
    "Space",
    "SpaceType",
]
