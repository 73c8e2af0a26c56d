from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.application.interfaces.room_catalog import RoomCatalogQuery, RoomView
from hotel_api.domain.errors import PersistenceError
from hotel_api.infrastructure.db.tables import hotels, rooms


class RoomCatalogSQL(RoomCatalogQuery):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_rooms(self) -> Sequence[RoomView]:
        stmt = (
            select(
                rooms.c.id,
                rooms.c.name,
                rooms.c.beds,
                rooms.c.pets_allowed,
                rooms.c.price_in_cents,
                rooms.c.hotel_id,
                hotels.c.name.label("hotel_name"),
            )
            .join(hotels, hotels.c.id == rooms.c.hotel_id)
            .order_by(rooms.c.id)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to fetch rooms") from exc
        return [
            RoomView(
                id=row["id"],
                name=row["name"],
                beds=row["beds"],
                pets_allowed=bool(row["pets_allowed"]),
                price_in_cents=row["price_in_cents"],
                hotel_id=row["hotel_id"],
                hotel_name=row["hotel_name"],
            )
            for row in result.mappings().all()
        ]
