from dataclasses import asdict
from datetime import date
from typing import Sequence

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.application.interfaces.order_repo import AddressInput, OrderRepo
from hotel_api.domain.errors import PersistenceError
from hotel_api.domain.pricing import PricedLineItem
from hotel_api.infrastructure.db.tables import customers, order_items, orders, rooms


class OrderRepoSQL(OrderRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _execute(self, stmt, operation: str):
        try:
            return await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to {operation}") from exc

    async def insert_customer(self, address: AddressInput) -> int:
        stmt = insert(customers).values(asdict(address))
        result = await self._execute(stmt, "insert customer")
        return result.inserted_primary_key[0]

    async def insert_order(self, customer_id: int) -> int:
        stmt = insert(orders).values(customer_id=customer_id)
        result = await self._execute(stmt, "insert order")
        return result.inserted_primary_key[0]

    async def insert_line_item(
        self,
        order_id: int,
        room_id: int,
        start_date: date,
        end_date: date,
    ) -> None:
        stmt = insert(order_items).values(
            order_id=order_id,
            room_id=room_id,
            start_date=start_date,
            end_date=end_date,
        )
        await self._execute(stmt, f"insert line item for room {room_id}")

    async def fetch_line_items_with_price(self, order_id: int) -> Sequence[PricedLineItem]:
        stmt = (
            select(
                order_items.c.start_date,
                order_items.c.end_date,
                rooms.c.price_in_cents,
            )
            .join(rooms, rooms.c.id == order_items.c.room_id)
            .where(order_items.c.order_id == order_id)
            .order_by(order_items.c.id)
        )
        result = await self._execute(stmt, "fetch line items")
        return [
            PricedLineItem(
                start_date=row["start_date"],
                end_date=row["end_date"],
                nightly_rate=row["price_in_cents"],
            )
            for row in result.mappings().all()
        ]

    async def fetch_customer_email(self, order_id: int) -> str | None:
        stmt = (
            select(customers.c.email)
            .join(orders, orders.c.customer_id == customers.c.id)
            .where(orders.c.id == order_id)
            .limit(1)
        )
        result = await self._execute(stmt, "fetch customer email")
        return result.scalar_one_or_none()
