from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.application.interfaces.payment_handle_repo import PaymentHandleRepo
from hotel_api.domain.errors import DuplicateHandleError, PersistenceError
from hotel_api.infrastructure.db.tables import order_payments


class PaymentHandleRepoSQL(PaymentHandleRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_handle_id(self, order_id: int) -> str | None:
        stmt = (
            select(order_payments.c.stripe_intent_id)
            .where(order_payments.c.order_id == order_id)
            .limit(1)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to read payment handle") from exc
        return result.scalar_one_or_none()

    async def insert_handle(self, order_id: int, handle_id: str) -> None:
        stmt = insert(order_payments).values(order_id=order_id, stripe_intent_id=handle_id)
        try:
            await self._session.execute(stmt)
        except IntegrityError as exc:
            # The transaction is unusable after the violation, so the caller
            # re-reads the winning row in a fresh one.
            raise DuplicateHandleError(order_id) from exc
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to insert payment handle") from exc
