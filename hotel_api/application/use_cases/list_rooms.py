from hotel_api.api.schemas.orders import HotelSummary, RoomListResponse, RoomResponse
from hotel_api.application.interfaces.room_catalog import RoomCatalogQuery


class ListRoomsUseCase:
    def __init__(self, room_catalog: RoomCatalogQuery) -> None:
        self._room_catalog = room_catalog

    async def execute(self) -> RoomListResponse:
        rooms = await self._room_catalog.list_rooms()
        return RoomListResponse(
            rooms=[
                RoomResponse(
                    id=room.id,
                    name=room.name,
                    bed_count=room.beds,
                    pets_allowed=room.pets_allowed,
                    price_in_minor_units=room.price_in_cents,
                    hotel=HotelSummary(id=room.hotel_id, name=room.hotel_name),
                )
                for room in rooms
            ]
        )
