"""HTTP tests for catalog and search endpoints."""
from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from workspace_catalog.db.session import get_session, get_session_factory
from workspace_catalog.main import app
from workspace_catalog.repositories import catalog as catalog_repo
from workspace_catalog.repositories.catalog import RawListing, RawLocation


class DummySessionFactory:
    def __call__(self):
        class _Session:
            async def __aenter__(self_inner):
                return AsyncMock()

            async def __aexit__(self_inner, exc_type, exc, tb):
                return False

        return _Session()


async def _dummy_session():
    yield AsyncMock()


@pytest.fixture
def overrides():
    app.dependency_overrides[get_session] = _dummy_session
    app.dependency_overrides[get_session_factory] = DummySessionFactory
    yield
    app.dependency_overrides.clear()


def _location(city: str, *, active: bool = True) -> RawLocation:
    return RawLocation(id=f"loc-{city}", name=f"{city} Hub", city=city, address="1 Main", is_active=active)


def _listing(listing_id: str, price: object = Decimal("4500.00")) -> RawListing:
    return RawListing(
        id=listing_id,
        name="Open Desk",
        type="hotdesk",
        capacity=1,
        price_per_month=price,
        description=None,
        image_url=None,
        amenities=["wifi", {"x": 1}],
        is_active=True,
        location=_location("Coimbatore"),
    )


@pytest.mark.asyncio
async def test_featured_endpoint(monkeypatch, overrides):
    monkeypatch.setattr(
        catalog_repo,
        "fetch_active_listings",
        AsyncMock(return_value=[_listing("a"), _listing("bad", price="?")]),
    )
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/catalog/featured")

    assert response.status_code == 200
    body = response.json()
    assert body["empty_message"] is None
    assert body["items"] == [
        {
            "id": "a",
            "name": "Open Desk",
            "type": "hotdesk",
            "capacity": 1,
            "price_per_month": 4500.0,
            "description": "",
            "image_url": "",
            "amenities": ["wifi"],
            "location": {"name": "Coimbatore Hub", "city": "Coimbatore", "address": "1 Main"},
        }
    ]


@pytest.mark.asyncio
async def test_featured_endpoint_empty_when_store_down(monkeypatch, overrides):
    monkeypatch.setattr(catalog_repo, "fetch_active_listings", AsyncMock(side_effect=OSError("down")))
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/catalog/featured")

    assert response.status_code == 200
    assert response.json() == {"items": [], "empty_message": "No spaces available at the moment."}


@pytest.mark.asyncio
async def test_cities_endpoint(monkeypatch, overrides):
    monkeypatch.setattr(
        catalog_repo,
        "fetch_active_locations",
        AsyncMock(return_value=[_location("Salem"), _location("Coimbatore"), _location("Salem")]),
    )
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/catalog/cities")

    assert response.status_code == 200
    assert response.json() == {
        "cities": ["Coimbatore", "Salem"],
        "links": [
            {"city": "Coimbatore", "path": "/spaces?city=Coimbatore"},
            {"city": "Salem", "path": "/spaces?city=Salem"},
        ],
    }


@pytest.mark.asyncio
async def test_home_endpoint_combines_independent_loads(monkeypatch, overrides):
    monkeypatch.setattr(catalog_repo, "fetch_active_locations", AsyncMock(side_effect=OSError("down")))
    monkeypatch.setattr(catalog_repo, "fetch_active_listings", AsyncMock(return_value=[_listing("a")]))
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/catalog/home")

    assert response.status_code == 200
    body = response.json()
    assert body["cities"] == []
    assert body["city_links"] == []
    assert [item["id"] for item in body["featured"]] == ["a"]
    assert [option["value"] for option in body["space_types"]] == ["hotdesk", "meeting_room", "private_office"]
    assert body["empty_message"] is None


@pytest.mark.asyncio
async def test_space_types_endpoint():
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/catalog/space-types")

    assert response.status_code == 200
    assert response.json()[0] == {"value": "hotdesk", "label": "Hot Desk"}


@pytest.mark.asyncio
async def test_search_path_endpoint():
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        full = await client.get("/api/search/path", params={"city": "Salem", "type": "meeting_room", "capacity": "4"})
        blank = await client.get("/api/search/path", params={"city": "", "type": "", "capacity": ""})

    assert full.status_code == 200
    assert full.json() == {"path": "/spaces?city=Salem&type=meeting_room&capacity=4"}
    assert blank.json() == {"path": "/spaces"}


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"capacity": "zero"}, {"capacity": "0"}, {"type": "ballroom"}])
async def test_search_path_rejects_invalid_input(params):
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/search/path", params=params)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_search_redirects_to_results():
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/search", params={"city": "Salem", "capacity": "2"})

    assert response.status_code == 303
    assert response.headers["location"] == "/spaces?city=Salem&capacity=2"


@pytest.mark.asyncio
async def test_search_path_errors_point_at_query_parameters():
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/search/path", params={"type": "ballroom", "capacity": "0"})

    assert response.status_code == 422
    locations = sorted(tuple(error["loc"]) for error in response.json()["detail"])
    assert locations == [("query", "capacity"), ("query", "type")]
