from hotel_api.infrastructure.in_memory.database import InMemoryDatabase
from hotel_api.infrastructure.in_memory.order_repo import InMemoryOrderRepo
from hotel_api.infrastructure.in_memory.payment_gateway import StubPaymentGateway
from hotel_api.infrastructure.in_memory.payment_handle_repo import InMemoryPaymentHandleRepo
from hotel_api.infrastructure.in_memory.room_catalog import InMemoryRoomCatalog
from hotel_api.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager

__all__ = [
    "InMemoryDatabase",
    "InMemoryOrderRepo",
    "InMemoryPaymentHandleRepo",
    "InMemoryRoomCatalog",
    "InMemoryTransactionManager",
    "StubPaymentGateway",
]
