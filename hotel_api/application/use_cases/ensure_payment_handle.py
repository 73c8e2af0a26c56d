import logging

from hotel_api.application.interfaces.order_repo import OrderRepo
from hotel_api.application.interfaces.payment_gateway import PaymentGateway, PaymentHandle
from hotel_api.application.interfaces.payment_handle_repo import PaymentHandleRepo
from hotel_api.application.interfaces.transaction_manager import TransactionManager
from hotel_api.domain.constants import PAYMENT_METHOD_TYPES
from hotel_api.domain.errors import (
    DuplicateHandleError,
    InvalidHandleIdError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from hotel_api.domain.pricing import compute_price
from hotel_api.domain.value_objects.payment_handle_id import PaymentHandleId


def payment_idempotency_key(order_id: int) -> str:
    """Processor-side key that makes repeated creates for one order return the same intent."""
    return f"order-{order_id}-payment-handle"


class EnsurePaymentHandleUseCase:
    """Return the single payment handle of an order, creating it on first use.

    The mapping read, the mapping insert and the gateway call each run
    outside of any shared transaction. Creates carry an order-scoped
    idempotency key, so racing or retried callers get the same processor
    intent back. Only one mapping insert can succeed; the loser re-reads the
    winner and returns that handle.
    """

    def __init__(
        self,
        order_repo: OrderRepo,
        payment_handle_repo: PaymentHandleRepo,
        payment_gateway: PaymentGateway,
        transaction_manager: TransactionManager,
        currency: str,
    ) -> None:
        self._order_repo = order_repo
        self._payment_handle_repo = payment_handle_repo
        self._payment_gateway = payment_gateway
        self._transaction_manager = transaction_manager
        self._currency = currency
        self._logger = logging.getLogger(__name__)

    async def execute(self, order_id: int) -> PaymentHandle:
        async with self._transaction_manager.start():
            existing = await self._payment_handle_repo.find_handle_id(order_id)
        if existing is not None:
            self._logger.info(
                "Reusing payment handle",
                extra={"order_id": order_id, "payment_handle_id": existing},
            )
            return await self._retrieve(order_id, existing)

        async with self._transaction_manager.start():
            line_items = await self._order_repo.fetch_line_items_with_price(order_id)
            email = await self._order_repo.fetch_customer_email(order_id)
        if not line_items:
            raise NotFoundError(order_id, "line items")
        if email is None:
            raise NotFoundError(order_id, "customer")

        amount = compute_price(line_items)
        if amount <= 0:
            raise ValidationError("roomsOrder", f"order {order_id} has nothing to charge")

        handle = await self._payment_gateway.create_handle(
            amount=amount,
            currency=self._currency,
            receipt_email=email,
            method_types=PAYMENT_METHOD_TYPES,
            metadata={"order_id": str(order_id)},
            idempotency_key=payment_idempotency_key(order_id),
        )

        try:
            async with self._transaction_manager.start():
                await self._payment_handle_repo.insert_handle(order_id, handle.id)
        except DuplicateHandleError:
            async with self._transaction_manager.start():
                winner = await self._payment_handle_repo.find_handle_id(order_id)
            if winner is None:
                raise PersistenceError(f"Payment handle for order {order_id} vanished after conflict")
            if winner == handle.id:
                self._logger.info(
                    "Concurrent request stored the same payment handle",
                    extra={"order_id": order_id, "payment_handle_id": winner},
                )
                return handle
            self._logger.warning(
                "Lost payment handle race, orphaned processor handle",
                extra={
                    "order_id": order_id,
                    "orphaned_handle_id": handle.id,
                    "payment_handle_id": winner,
                },
            )
            return await self._retrieve(order_id, winner)

        self._logger.info(
            "Payment handle created",
            extra={"order_id": order_id, "payment_handle_id": handle.id, "amount": amount},
        )
        return handle

    async def _retrieve(self, order_id: int, raw_handle_id: str) -> PaymentHandle:
        try:
            handle_id = PaymentHandleId.from_string(raw_handle_id)
        except ValueError as exc:
            self._logger.error(
                "Stored payment handle id is malformed",
                extra={"order_id": order_id, "payment_handle_id": raw_handle_id},
            )
            raise InvalidHandleIdError(order_id, raw_handle_id) from exc
        return await self._payment_gateway.retrieve_handle(str(handle_id))
