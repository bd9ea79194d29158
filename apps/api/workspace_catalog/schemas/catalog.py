"""Schemas for the workspace catalog."""
from __future__ import annotations

from pydantic import BaseModel, Field


class LocationSummary(BaseModel):
    name: str
    city: str
    address: str


class PresentationListing(BaseModel):
    """Listing shape handed to the rendering layer; no field is ever null."""

    id: str
    name: str
    type: str
    capacity: int = Field(ge=1)
    price_per_month: float = Field(ge=0, allow_inf_nan=False)
    description: str = ""
    image_url: str = ""
    amenities: list[str] = Field(default_factory=list)
    location: LocationSummary


class FeaturedCatalogResponse(BaseModel):
    items: list[PresentationListing]
    empty_message: str | None = None


class CityLink(BaseModel):
    city: str
    path: str


class CityDirectoryResponse(BaseModel):
    cities: list[str]
    links: list[CityLink] = Field(default_factory=list)


class SpaceTypeOption(BaseModel):
    value: str
    label: str


class HomepageResponse(BaseModel):
    cities: list[str]
    city_links: list[CityLink] = Field(default_factory=list)
    featured: list[PresentationListing]
    space_types: list[SpaceTypeOption]
    empty_message: str | None = None
