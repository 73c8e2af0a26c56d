from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.api.deps import AsyncSessionLocal
from hotel_api.application.interfaces.payment_gateway import PaymentGateway
from hotel_api.application.use_cases.ensure_payment_handle import EnsurePaymentHandleUseCase
from hotel_api.application.use_cases.list_rooms import ListRoomsUseCase
from hotel_api.application.use_cases.place_order import PlaceOrderUseCase
from hotel_api.config import Settings, get_settings
from hotel_api.infrastructure.db.queries.room_catalog_sql import RoomCatalogSQL
from hotel_api.infrastructure.db.repositories.order_repo_sql import OrderRepoSQL
from hotel_api.infrastructure.db.repositories.payment_handle_repo_sql import PaymentHandleRepoSQL
from hotel_api.infrastructure.db.seed import DEMO_HOTELS, DEMO_ROOMS
from hotel_api.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from hotel_api.infrastructure.gateways.stripe_gateway import StripePaymentGateway
from hotel_api.infrastructure.in_memory import (
    InMemoryDatabase,
    InMemoryOrderRepo,
    InMemoryPaymentHandleRepo,
    InMemoryRoomCatalog,
    InMemoryTransactionManager,
    StubPaymentGateway,
)


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


def build_in_memory_bundle() -> dict:
    db = InMemoryDatabase()
    db.seed_catalog(DEMO_HOTELS, DEMO_ROOMS)
    return {
        "db": db,
        "order_repo": InMemoryOrderRepo(db),
        "payment_handle_repo": InMemoryPaymentHandleRepo(db),
        "room_catalog": InMemoryRoomCatalog(db),
        "payment_gateway": StubPaymentGateway(),
        "tx_manager": InMemoryTransactionManager(),
    }


@lru_cache(maxsize=1)
def _in_memory_bundle() -> dict:
    return build_in_memory_bundle()


@lru_cache(maxsize=4)
def _stripe_gateway(api_key: str | None, timeout_seconds: float, max_network_retries: int) -> PaymentGateway:
    return StripePaymentGateway(
        api_key=api_key,
        timeout_seconds=timeout_seconds,
        max_network_retries=max_network_retries,
    )


def build_use_cases(bundle: dict, currency: str) -> dict:
    return {
        "place_order": PlaceOrderUseCase(
            order_repo=bundle["order_repo"],
            transaction_manager=bundle["tx_manager"],
        ),
        "ensure_payment_handle": EnsurePaymentHandleUseCase(
            order_repo=bundle["order_repo"],
            payment_handle_repo=bundle["payment_handle_repo"],
            payment_gateway=bundle["payment_gateway"],
            transaction_manager=bundle["tx_manager"],
            currency=currency,
        ),
        "list_rooms": ListRoomsUseCase(room_catalog=bundle["room_catalog"]),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    if settings.use_in_memory:
        return build_use_cases(_in_memory_bundle(), settings.payment_currency)

    if session is None:
        raise RuntimeError("DB session not available")

    bundle = {
        "order_repo": OrderRepoSQL(session),
        "payment_handle_repo": PaymentHandleRepoSQL(session),
        "room_catalog": RoomCatalogSQL(session),
        "payment_gateway": _stripe_gateway(
            settings.stripe_api_key,
            settings.payment_timeout_seconds,
            settings.stripe_max_network_retries,
        ),
        "tx_manager": SQLAlchemyTransactionManager(session),
    }
    return build_use_cases(bundle, settings.payment_currency)
