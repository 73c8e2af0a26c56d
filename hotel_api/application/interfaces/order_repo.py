from dataclasses import dataclass
from datetime import date
from typing import Sequence

from hotel_api.domain.pricing import PricedLineItem


@dataclass
class AddressInput:
    email: str
    billing_street: str
    billing_city: str
    billing_postcode: str
    billing_country: str
    billing_street_add: str = ""


@dataclass
class LineItemInput:
    room_id: int
    start_date: date
    end_date: date


class OrderRepo:
    async def insert_customer(self, address: AddressInput) -> int:
        raise NotImplementedError

    async def insert_order(self, customer_id: int) -> int:
        raise NotImplementedError

    async def insert_line_item(
        self,
        order_id: int,
        room_id: int,
        start_date: date,
        end_date: date,
    ) -> None:
        raise NotImplementedError

    async def fetch_line_items_with_price(self, order_id: int) -> Sequence[PricedLineItem]:
        raise NotImplementedError

    async def fetch_customer_email(self, order_id: int) -> str | None:
        raise NotImplementedError
