from fastapi import APIRouter, Depends, status

from hotel_api.api.dependencies import get_use_cases
from hotel_api.api.schemas.orders import RoomListResponse

router = APIRouter()


@router.get(
    "/rooms",
    response_model=RoomListResponse,
    status_code=status.HTTP_200_OK,
)
async def list_rooms(use_cases=Depends(get_use_cases)) -> RoomListResponse:
    return await use_cases["list_rooms"].execute()
