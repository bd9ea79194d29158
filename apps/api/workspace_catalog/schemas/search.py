"""Schemas for search submissions."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..models.space import SpaceType


class FilterCriteria(BaseModel):
    """Filters chosen on the search form; blank form values count as unset."""

    city: str | None = Field(default=None)
    type: SpaceType | None = Field(default=None)
    capacity: int | None = Field(default=None, ge=1)

    @field_validator("city", "type", "capacity", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SearchPathResponse(BaseModel):
    path: str
