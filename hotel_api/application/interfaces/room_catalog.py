from dataclasses import dataclass
from typing import Sequence


@dataclass
class RoomView:
    id: int
    name: str
    beds: int
    pets_allowed: bool
    price_in_cents: int
    hotel_id: int
    hotel_name: str


class RoomCatalogQuery:
    async def list_rooms(self) -> Sequence[RoomView]:
        raise NotImplementedError
