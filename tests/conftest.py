"""
Pytest configuration and shared fixtures.

- SQLite in-memory database (one shared connection) seeded with the demo catalog
- In-memory bundle (repos, stub gateway, undo-journal transactions)
- FastAPI TestClient bound to an isolated in-memory bundle
"""

import os

os.environ.setdefault("USE_IN_MEMORY", "true")

from typing import AsyncGenerator, Generator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from hotel_api.api.dependencies import build_in_memory_bundle, build_use_cases, get_use_cases  # noqa: E402
from hotel_api.api.schemas.orders import CreateOrderRequest  # noqa: E402
from hotel_api.infrastructure.circuit_breaker import payment_breaker  # noqa: E402
from hotel_api.infrastructure.db.engine import build_sessionmaker, enforce_foreign_keys  # noqa: E402
from hotel_api.infrastructure.db.seed import seed_catalog  # noqa: E402
from hotel_api.infrastructure.db.tables import metadata  # noqa: E402
from hotel_api.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Fresh in-memory SQLite per test, foreign keys on, demo catalog loaded."""
    engine = enforce_foreign_keys(
        create_async_engine(
            TEST_DATABASE_URL,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await seed_catalog(conn)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return build_sessionmaker(test_engine)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ============================================================================
# IN-MEMORY FIXTURES
# ============================================================================

@pytest.fixture
def bundle() -> dict:
    return build_in_memory_bundle()


@pytest.fixture
def use_cases(bundle) -> dict:
    return build_use_cases(bundle, currency="usd")


@pytest.fixture
def client(bundle) -> Generator[TestClient, None, None]:
    """TestClient wired to a private in-memory bundle."""
    app.dependency_overrides[get_use_cases] = lambda: build_use_cases(bundle, currency="usd")

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# SAMPLE DATA
# ============================================================================

@pytest.fixture
def sample_order_payload() -> dict:
    """One night-pair in the 5000/night demo room."""
    return {
        "roomsOrder": [
            {"roomId": 1, "startDate": "2024-03-01", "endDate": "2024-03-03"},
        ],
        "addressDetails": {
            "email": "a@b.com",
            "billingStreet": "Main St",
            "billingCity": "X",
            "billingPostcode": "00-000",
            "billingCountry": "PL",
        },
    }


@pytest.fixture
def sample_order_request(sample_order_payload) -> CreateOrderRequest:
    return CreateOrderRequest.model_validate(sample_order_payload)


# ============================================================================
# HOOKS
# ============================================================================

@pytest.fixture(autouse=True)
def reset_circuit_breaker():
    """Keep a breaker opened by one test from failing the next."""
    payment_breaker.close()
    yield
    payment_breaker.close()
