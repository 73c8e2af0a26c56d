import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.application.interfaces.transaction_manager import TransactionManager
from hotel_api.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


class SQLAlchemyTransactionManager(TransactionManager):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        if self._session.in_transaction():
            yield
            return
        try:
            async with self._session.begin():
                yield
        except SQLAlchemyError as exc:
            logger.error("Transaction rolled back", exc_info=exc)
            raise PersistenceError("Database transaction failed") from exc
