from fastapi import APIRouter, Depends, status

from hotel_api.api.dependencies import get_use_cases
from hotel_api.api.schemas.orders import (
    CreateOrderRequest,
    CreateOrderResponse,
    PaymentHandleResponse,
)

router = APIRouter()


@router.post(
    "/orders",
    response_model=CreateOrderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    payload: CreateOrderRequest,
    use_cases=Depends(get_use_cases),
) -> CreateOrderResponse:
    return await use_cases["place_order"].execute(request=payload)


@router.post(
    "/orders/{order_id}/payment",
    response_model=PaymentHandleResponse,
    status_code=status.HTTP_200_OK,
)
async def ensure_payment_handle(
    order_id: int,
    use_cases=Depends(get_use_cases),
) -> PaymentHandleResponse:
    handle = await use_cases["ensure_payment_handle"].execute(order_id=order_id)
    return PaymentHandleResponse(client_secret=handle.client_secret)
