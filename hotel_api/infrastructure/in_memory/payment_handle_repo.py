from hotel_api.application.interfaces.payment_handle_repo import PaymentHandleRepo
from hotel_api.domain.errors import DuplicateHandleError, PersistenceError
from hotel_api.infrastructure.in_memory.database import InMemoryDatabase, record_undo


class InMemoryPaymentHandleRepo(PaymentHandleRepo):
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_handle_id(self, order_id: int) -> str | None:
        return self._db.order_payments.get(order_id)

    async def insert_handle(self, order_id: int, handle_id: str) -> None:
        if order_id not in self._db.orders:
            raise PersistenceError(f"Failed to insert payment handle: unknown order {order_id}")
        # check-and-set without an await in between, atomic on the event loop
        if order_id in self._db.order_payments:
            raise DuplicateHandleError(order_id)
        self._db.order_payments[order_id] = handle_id
        record_undo(lambda: self._db.order_payments.pop(order_id, None))
