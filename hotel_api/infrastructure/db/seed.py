from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncConnection

from hotel_api.infrastructure.db.tables import hotels, rooms

DEMO_HOTELS = [
    {"id": 1, "name": "Grand Budapest"},
    {"id": 2, "name": "Overlook"},
]

DEMO_ROOMS = [
    {"id": 1, "name": "Standard Double", "beds": 2, "pets_allowed": False, "price_in_cents": 5000, "hotel_id": 1},
    {"id": 2, "name": "Family Suite", "beds": 4, "pets_allowed": True, "price_in_cents": 12000, "hotel_id": 1},
    {"id": 3, "name": "Room 237", "beds": 1, "pets_allowed": False, "price_in_cents": 9900, "hotel_id": 2},
]


async def seed_catalog(conn: AsyncConnection) -> None:
    await conn.execute(insert(hotels), DEMO_HOTELS)
    await conn.execute(insert(rooms), DEMO_ROOMS)
