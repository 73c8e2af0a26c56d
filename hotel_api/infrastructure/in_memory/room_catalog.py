from typing import Sequence

from hotel_api.application.interfaces.room_catalog import RoomCatalogQuery, RoomView
from hotel_api.infrastructure.in_memory.database import InMemoryDatabase


class InMemoryRoomCatalog(RoomCatalogQuery):
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def list_rooms(self) -> Sequence[RoomView]:
        views = []
        for room_id, room in sorted(self._db.rooms.items()):
            hotel = self._db.hotels[room["hotel_id"]]
            views.append(
                RoomView(
                    id=room_id,
                    name=room["name"],
                    beds=room["beds"],
                    pets_allowed=room["pets_allowed"],
                    price_in_cents=room["price_in_cents"],
                    hotel_id=hotel["id"],
                    hotel_name=hotel["name"],
                )
            )
        return views
