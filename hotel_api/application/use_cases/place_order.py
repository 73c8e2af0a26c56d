import logging

from hotel_api.api.schemas.orders import CreateOrderRequest, CreateOrderResponse
from hotel_api.application.interfaces.order_repo import AddressInput, LineItemInput, OrderRepo
from hotel_api.application.interfaces.transaction_manager import TransactionManager
from hotel_api.domain.errors import DomainError, PersistenceError, ValidationError


class PlaceOrderUseCase:
    def __init__(
        self,
        order_repo: OrderRepo,
        transaction_manager: TransactionManager,
    ) -> None:
        self._order_repo = order_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: CreateOrderRequest) -> CreateOrderResponse:
        if not request.rooms_order:
            raise ValidationError("roomsOrder", "at least one room is required")

        details = request.address_details
        address = AddressInput(
            email=str(details.email),
            billing_street=details.billing_street,
            billing_street_add=details.billing_street_add or "",
            billing_city=details.billing_city,
            billing_postcode=details.billing_postcode,
            billing_country=details.billing_country,
        )
        line_items = [
            LineItemInput(
                room_id=room.room_id,
                start_date=room.start_date,
                end_date=room.end_date,
            )
            for room in request.rooms_order
        ]

        try:
            async with self._transaction_manager.start():
                customer_id = await self._order_repo.insert_customer(address)
                order_id = await self._order_repo.insert_order(customer_id)
                for item in line_items:
                    await self._order_repo.insert_line_item(
                        order_id=order_id,
                        room_id=item.room_id,
                        start_date=item.start_date,
                        end_date=item.end_date,
                    )
        except DomainError:
            raise
        except Exception as exc:
            self._logger.error(
                "Order persistence failed",
                exc_info=exc,
                extra={"line_items": len(line_items)},
            )
            raise PersistenceError("Failed to persist order") from exc

        self._logger.info(
            "Order placed",
            extra={"order_id": order_id, "customer_id": customer_id, "line_items": len(line_items)},
        )
        return CreateOrderResponse(order_id=order_id)
