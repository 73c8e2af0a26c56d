from dataclasses import asdict
from datetime import date, datetime, timezone
from typing import Sequence

from hotel_api.application.interfaces.order_repo import AddressInput, OrderRepo
from hotel_api.domain.errors import PersistenceError
from hotel_api.domain.pricing import PricedLineItem
from hotel_api.infrastructure.in_memory.database import InMemoryDatabase


class InMemoryOrderRepo(OrderRepo):
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def insert_customer(self, address: AddressInput) -> int:
        return self._db.insert("customers", asdict(address))

    async def insert_order(self, customer_id: int) -> int:
        if customer_id not in self._db.customers:
            raise PersistenceError(f"Failed to insert order: unknown customer {customer_id}")
        return self._db.insert(
            "orders",
            {"customer_id": customer_id, "created_at": datetime.now(timezone.utc)},
        )

    async def insert_line_item(
        self,
        order_id: int,
        room_id: int,
        start_date: date,
        end_date: date,
    ) -> None:
        if order_id not in self._db.orders:
            raise PersistenceError(f"Failed to insert line item: unknown order {order_id}")
        if room_id not in self._db.rooms:
            raise PersistenceError(f"Failed to insert line item: unknown room {room_id}")
        self._db.insert(
            "order_items",
            {
                "order_id": order_id,
                "room_id": room_id,
                "start_date": start_date,
                "end_date": end_date,
            },
        )

    async def fetch_line_items_with_price(self, order_id: int) -> Sequence[PricedLineItem]:
        return [
            PricedLineItem(
                start_date=item["start_date"],
                end_date=item["end_date"],
                nightly_rate=self._db.rooms[item["room_id"]]["price_in_cents"],
            )
            for _, item in sorted(self._db.order_items.items())
            if item["order_id"] == order_id
        ]

    async def fetch_customer_email(self, order_id: int) -> str | None:
        order = self._db.orders.get(order_id)
        if not order:
            return None
        customer = self._db.customers.get(order["customer_id"])
        return customer["email"] if customer else None
