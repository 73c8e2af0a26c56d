from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    """Scoped transactional handle: commit on clean exit, rollback on any exception."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
