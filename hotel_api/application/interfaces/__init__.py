from hotel_api.application.interfaces.order_repo import AddressInput, LineItemInput, OrderRepo
from hotel_api.application.interfaces.payment_gateway import PaymentGateway, PaymentHandle
from hotel_api.application.interfaces.payment_handle_repo import PaymentHandleRepo
from hotel_api.application.interfaces.room_catalog import RoomCatalogQuery, RoomView
from hotel_api.application.interfaces.transaction_manager import TransactionManager

__all__ = [
    "AddressInput",
    "LineItemInput",
    "OrderRepo",
    "PaymentGateway",
    "PaymentHandle",
    "PaymentHandleRepo",
    "RoomCatalogQuery",
    "RoomView",
    "TransactionManager",
]
