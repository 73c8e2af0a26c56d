"""
Integration tests for the SQL order store on SQLite.

Covers:
- atomic order persistence (no partial customer/order/items after a failure)
- the unique order_id constraint on order_payments
- the priced line item join and customer email lookup
"""

from datetime import date

import pytest
from sqlalchemy import func, select

from hotel_api.api.schemas.orders import CreateOrderRequest
from hotel_api.application.interfaces.order_repo import AddressInput
from hotel_api.application.use_cases.place_order import PlaceOrderUseCase
from hotel_api.domain.errors import DuplicateHandleError, PersistenceError
from hotel_api.domain.pricing import compute_price
from hotel_api.infrastructure.db.repositories.order_repo_sql import OrderRepoSQL
from hotel_api.infrastructure.db.repositories.payment_handle_repo_sql import PaymentHandleRepoSQL
from hotel_api.infrastructure.db.tables import customers, order_items, order_payments, orders
from hotel_api.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager

pytestmark = pytest.mark.integration


async def _count(session_factory, table) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(table))
        return result.scalar_one()


def _place_order_use_case(session) -> PlaceOrderUseCase:
    return PlaceOrderUseCase(
        order_repo=OrderRepoSQL(session),
        transaction_manager=SQLAlchemyTransactionManager(session),
    )


class TestOrderPersistence:
    async def test_order_is_written_in_one_transaction(self, db_session, session_factory, sample_order_request):
        response = await _place_order_use_case(db_session).execute(sample_order_request)

        assert response.order_id > 0
        assert await _count(session_factory, customers) == 1
        assert await _count(session_factory, orders) == 1
        assert await _count(session_factory, order_items) == 1

    async def test_invalid_room_on_third_item_rolls_back_everything(self, db_session, session_factory):
        request = CreateOrderRequest.model_validate(
            {
                "roomsOrder": [
                    {"roomId": 1, "startDate": "2024-03-01", "endDate": "2024-03-03"},
                    {"roomId": 2, "startDate": "2024-03-01", "endDate": "2024-03-03"},
                    {"roomId": 999, "startDate": "2024-03-01", "endDate": "2024-03-03"},
                ],
                "addressDetails": {
                    "email": "a@b.com",
                    "billingStreet": "Main St",
                    "billingCity": "X",
                    "billingPostcode": "00-000",
                    "billingCountry": "PL",
                },
            }
        )

        with pytest.raises(PersistenceError):
            await _place_order_use_case(db_session).execute(request)

        assert await _count(session_factory, customers) == 0
        assert await _count(session_factory, orders) == 0
        assert await _count(session_factory, order_items) == 0

    async def test_session_is_usable_after_a_rolled_back_order(self, db_session, session_factory, sample_order_request):
        bad = sample_order_request.model_copy(deep=True)
        bad.rooms_order[0].room_id = 999
        use_case = _place_order_use_case(db_session)

        with pytest.raises(PersistenceError):
            await use_case.execute(bad)
        response = await use_case.execute(sample_order_request)

        assert response.order_id > 0
        assert await _count(session_factory, orders) == 1


class TestOrderQueries:
    async def _seed_order(self, session) -> int:
        repo = OrderRepoSQL(session)
        async with SQLAlchemyTransactionManager(session).start():
            customer_id = await repo.insert_customer(
                AddressInput(
                    email="guest@example.com",
                    billing_street="Main St",
                    billing_city="X",
                    billing_postcode="00-000",
                    billing_country="PL",
                )
            )
            order_id = await repo.insert_order(customer_id)
            await repo.insert_line_item(order_id, 1, date(2024, 3, 1), date(2024, 3, 3))
            await repo.insert_line_item(order_id, 2, date(2024, 3, 1), date(2024, 3, 2))
        return order_id

    async def test_line_items_join_room_prices_in_insert_order(self, db_session):
        order_id = await self._seed_order(db_session)

        async with SQLAlchemyTransactionManager(db_session).start():
            items = await OrderRepoSQL(db_session).fetch_line_items_with_price(order_id)

        assert [item.nightly_rate for item in items] == [5000, 12000]
        assert items[0].start_date == date(2024, 3, 1)
        assert compute_price(items) == 2 * 5000 + 12000

    async def test_customer_email_lookup(self, db_session):
        order_id = await self._seed_order(db_session)
        repo = OrderRepoSQL(db_session)

        async with SQLAlchemyTransactionManager(db_session).start():
            assert await repo.fetch_customer_email(order_id) == "guest@example.com"
            assert await repo.fetch_customer_email(order_id + 100) is None
            assert await repo.fetch_line_items_with_price(order_id + 100) == []


class TestPaymentHandleMapping:
    async def test_second_insert_for_same_order_is_rejected(self, db_session, session_factory, sample_order_request):
        order_id = (await _place_order_use_case(db_session).execute(sample_order_request)).order_id
        repo = PaymentHandleRepoSQL(db_session)
        tx = SQLAlchemyTransactionManager(db_session)

        async with tx.start():
            await repo.insert_handle(order_id, "pi_first")
        with pytest.raises(DuplicateHandleError):
            async with tx.start():
                await repo.insert_handle(order_id, "pi_second")

        async with tx.start():
            assert await repo.find_handle_id(order_id) == "pi_first"
        assert await _count(session_factory, order_payments) == 1

    async def test_missing_mapping_reads_as_none(self, db_session):
        async with SQLAlchemyTransactionManager(db_session).start():
            assert await PaymentHandleRepoSQL(db_session).find_handle_id(1) is None
