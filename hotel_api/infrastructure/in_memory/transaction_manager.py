from contextlib import asynccontextmanager

from hotel_api.application.interfaces.transaction_manager import TransactionManager
from hotel_api.infrastructure.in_memory.database import begin_undo_log, end_undo_log, in_undo_log


class InMemoryTransactionManager(TransactionManager):
    """Undo-journal transactions: rows written inside a failed block are removed again."""

    @asynccontextmanager
    async def start(self):
        if in_undo_log():
            yield
            return
        undo, token = begin_undo_log()
        try:
            yield
        except BaseException:
            for action in reversed(undo):
                action()
            raise
        finally:
            end_undo_log(token)
