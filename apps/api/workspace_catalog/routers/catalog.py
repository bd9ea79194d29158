"""Catalog endpoints backing the landing view."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..db.session import get_session, get_session_factory
from ..schemas import catalog as catalog_schema
from ..services import catalog as catalog_service
from ..services import homepage as homepage_service
from ..services.search import city_shortcut_path

router = APIRouter()


def _city_links(cities: list[str]) -> list[catalog_schema.CityLink]:
    return [catalog_schema.CityLink(city=city, path=city_shortcut_path(city)) for city in cities]


@router.get("/featured", response_model=catalog_schema.FeaturedCatalogResponse)
async def featured(
    session: AsyncSession = Depends(get_session),
) -> catalog_schema.FeaturedCatalogResponse:
    """Return the bounded featured sample of active listings."""

    items = await catalog_service.load_featured_catalog(session)
    return catalog_schema.FeaturedCatalogResponse(
        items=items,
        empty_message=catalog_service.empty_message_for(items),
    )


@router.get("/cities", response_model=catalog_schema.CityDirectoryResponse)
async def cities(
    session: AsyncSession = Depends(get_session),
) -> catalog_schema.CityDirectoryResponse:
    """Return the cities that have at least one active location."""

    directory = await catalog_service.load_city_directory(session)
    return catalog_schema.CityDirectoryResponse(cities=directory, links=_city_links(directory))


@router.get("/space-types", response_model=list[catalog_schema.SpaceTypeOption])
async def space_types() -> list[catalog_schema.SpaceTypeOption]:
    """Return the workspace-type filter options."""

    return catalog_service.space_type_options()


@router.get("/home", response_model=catalog_schema.HomepageResponse)
async def home(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> catalog_schema.HomepageResponse:
    """Return everything the landing view needs, loading cities and listings concurrently."""

    state = await homepage_service.load_homepage(session_factory)
    return catalog_schema.HomepageResponse(
        cities=state.cities,
        city_links=_city_links(state.cities),
        featured=state.featured,
        space_types=catalog_service.space_type_options(),
        empty_message=catalog_service.empty_message_for(state.featured),
    )
