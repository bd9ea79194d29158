"""Create database schema and seed sample workspaces for development."""
from __future__ import annotations

import asyncio
from decimal import Decimal

from workspace_catalog.db.session import SessionLocal, engine
from workspace_catalog.models.base import Base
from workspace_catalog.models.location import Location
from workspace_catalog.models.space import Space, SpaceType

LOCATIONS = [
	{
		"id": "loc-rs-puram",
		"name": "RS Puram Hub",
		"city": "Coimbatore",
		"address": "14 DB Road, RS Puram",
		"is_active": True,
		"spaces": [
			{
				"id": "space-rsp-desk",
				"name": "Open Floor Hot Desk",
				"type": SpaceType.HOTDESK,
				"capacity": 1,
				"price_per_month": Decimal("4500.00"),
				"description": "Flexible seat on the open floor with lockers.",
				"image_url": "https://picsum.photos/seed/rspdesk/800/600",
				"amenities": ["wifi", "coffee", "lockers"],
				"is_active": True,
			},
			{
				"id": "space-rsp-board",
				"name": "Boardroom",
				"type": SpaceType.MEETING_ROOM,
				"capacity": 12,
				"price_per_month": Decimal("30000.00"),
				"description": None,
				"image_url": None,
				"amenities": ["projector", "whiteboard", {"legacy": "video-conf"}],
				"is_active": True,
			},
		],
	},
	{
		"id": "loc-koramangala",
		"name": "Koramangala Works",
		"city": "Bengaluru",
		"address": "80 Feet Road, 4th Block",
		"is_active": True,
		"spaces": [
			{
				"id": "space-kor-office-4",
				"name": "Four Seat Private Office",
				"type": SpaceType.PRIVATE_OFFICE,
				"capacity": 4,
				"price_per_month": Decimal("42000.00"),
				"description": "Lockable cabin with natural light.",
				"image_url": "https://picsum.photos/seed/kor4/800/600",
				"amenities": ["wifi", "printing", 24],
				"is_active": True,
			},
			{
				"id": "space-kor-huddle",
				"name": "Huddle Room",
				"type": SpaceType.MEETING_ROOM,
				"capacity": 4,
				"price_per_month": Decimal("12000.00"),
				"description": "Small room for quick syncs.",
				"image_url": None,
				"amenities": None,
				"is_active": False,
			},
		],
	},
	{
		"id": "loc-salem-central",
		"name": "Salem Central",
		"city": "Salem",
		"address": "2 Omalur Main Road",
		"is_active": True,
		"spaces": [
			{
				"id": "space-salem-room",
				"name": "Training Room",
				"type": SpaceType.MEETING_ROOM,
				"capacity": 20,
				"price_per_month": Decimal("25000.00"),
				"description": "Classroom layout with a sound system.",
				"image_url": "https://picsum.photos/seed/salemroom/800/600",
				"amenities": ["wifi", "sound system"],
				"is_active": True,
			},
		],
	},
	{
		"id": "loc-old-town",
		"name": "Old Town Annex",
		"city": "Madurai",
		"address": "9 West Masi Street",
		"is_active": False,
		"spaces": [],
	},
]


async def create_schema() -> None:
	"""Create the database schema if it does not already exist."""

	async with engine.begin() as conn:
		await conn.run_sync(Base.metadata.create_all)


async def seed_locations() -> None:
	"""Insert or update demo locations and their spaces."""

	async with SessionLocal() as session:
		async with session.begin():
			for loc in LOCATIONS:
				location_obj = await session.get(Location, loc["id"])
				if location_obj is None:
					location_obj = Location(id=loc["id"])
					session.add(location_obj)
				location_obj.name = loc["name"]
				location_obj.city = loc["city"]
				location_obj.address = loc["address"]
				location_obj.is_active = loc["is_active"]

				for space_data in loc["spaces"]:
					space_obj = await session.get(Space, space_data["id"])
					if space_obj is None:
						space_obj = Space(id=space_data["id"])
						session.add(space_obj)
					space_obj.location_id = loc["id"]
					space_obj.name = space_data["name"]
					space_obj.type = space_data["type"].value
					space_obj.capacity = space_data["capacity"]
					space_obj.price_per_month = space_data["price_per_month"]
					space_obj.description = space_data["description"]
					space_obj.image_url = space_data["image_url"]
					space_obj.amenities = space_data["amenities"] or []
					space_obj.is_active = space_data["is_active"]


async def main() -> None:
	await create_schema()
	await seed_locations()
	print("Database schema ensured and demo workspaces seeded.")


if __name__ == "__main__":
	asyncio.run(main())
