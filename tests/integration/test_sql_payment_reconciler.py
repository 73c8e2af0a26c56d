"""
Integration tests for payment handle reconciliation on SQLite.

The race test lets a competing request store its mapping while this
request is talking to the processor, so the unique constraint on
order_payments.order_id has to resolve the conflict.
"""

import pytest
from sqlalchemy import func, insert, select

from hotel_api.application.use_cases.ensure_payment_handle import EnsurePaymentHandleUseCase
from hotel_api.application.use_cases.place_order import PlaceOrderUseCase
from hotel_api.domain.errors import GatewayError
from hotel_api.infrastructure.db.repositories.order_repo_sql import OrderRepoSQL
from hotel_api.infrastructure.db.repositories.payment_handle_repo_sql import PaymentHandleRepoSQL
from hotel_api.infrastructure.db.tables import order_payments
from hotel_api.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from hotel_api.infrastructure.in_memory.payment_gateway import StubPaymentGateway

pytestmark = pytest.mark.integration


class RacingGateway(StubPaymentGateway):
    """Stores a competitor's mapping while our own create call is in flight.

    With shared_key the competitor used the same idempotency key, so the
    processor hands both callers one intent.
    """

    def __init__(self, session_factory, order_id: int, shared_key: bool = False) -> None:
        super().__init__()
        self._session_factory = session_factory
        self._order_id = order_id
        self._shared_key = shared_key
        self.winner_id: str | None = None

    async def create_handle(self, *args, **kwargs):
        if self.winner_id is None:
            competitor_kwargs = kwargs if self._shared_key else {**kwargs, "idempotency_key": None}
            winner = await super().create_handle(*args, **competitor_kwargs)
            self.winner_id = winner.id
            async with self._session_factory() as session, session.begin():
                await session.execute(
                    insert(order_payments).values(order_id=self._order_id, stripe_intent_id=winner.id)
                )
        return await super().create_handle(*args, **kwargs)


def _reconciler(session, gateway) -> EnsurePaymentHandleUseCase:
    return EnsurePaymentHandleUseCase(
        order_repo=OrderRepoSQL(session),
        payment_handle_repo=PaymentHandleRepoSQL(session),
        payment_gateway=gateway,
        transaction_manager=SQLAlchemyTransactionManager(session),
        currency="usd",
    )


async def _place(session, request) -> int:
    use_case = PlaceOrderUseCase(
        order_repo=OrderRepoSQL(session),
        transaction_manager=SQLAlchemyTransactionManager(session),
    )
    return (await use_case.execute(request)).order_id


async def _mapping_rows(session_factory, order_id: int) -> list[str]:
    async with session_factory() as session:
        result = await session.execute(
            select(order_payments.c.stripe_intent_id).where(order_payments.c.order_id == order_id)
        )
        return list(result.scalars().all())


class TestReconcilerOnSQL:
    async def test_end_to_end_order_then_payment(self, db_session, session_factory, sample_order_request):
        gateway = StubPaymentGateway()
        order_id = await _place(db_session, sample_order_request)
        reconciler = _reconciler(db_session, gateway)

        first = await reconciler.execute(order_id)
        second = await reconciler.execute(order_id)

        assert first.amount == 10000
        assert second.id == first.id
        assert gateway.create_calls == 1
        assert gateway.retrieve_calls == 1
        assert await _mapping_rows(session_factory, order_id) == [first.id]

    async def test_lost_race_returns_the_stored_handle(self, db_session, session_factory, sample_order_request):
        order_id = await _place(db_session, sample_order_request)
        gateway = RacingGateway(session_factory, order_id)

        handle = await _reconciler(db_session, gateway).execute(order_id)

        assert handle.id == gateway.winner_id
        assert await _mapping_rows(session_factory, order_id) == [gateway.winner_id]
        # our own intent was created but is left unused
        assert len(gateway.handles) == 2

    async def test_race_with_shared_idempotency_key_leaves_no_orphan(
        self, db_session, session_factory, sample_order_request
    ):
        order_id = await _place(db_session, sample_order_request)
        gateway = RacingGateway(session_factory, order_id, shared_key=True)

        handle = await _reconciler(db_session, gateway).execute(order_id)

        assert handle.id == gateway.winner_id
        assert await _mapping_rows(session_factory, order_id) == [gateway.winner_id]
        assert len(gateway.handles) == 1

    async def test_gateway_failure_writes_no_mapping(self, db_session, session_factory, sample_order_request):
        gateway = StubPaymentGateway()
        gateway.fail_with = "processor unavailable"
        order_id = await _place(db_session, sample_order_request)

        with pytest.raises(GatewayError):
            await _reconciler(db_session, gateway).execute(order_id)

        async with session_factory() as session:
            count = await session.execute(select(func.count()).select_from(order_payments))
            assert count.scalar_one() == 0
