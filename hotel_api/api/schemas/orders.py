from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RoomOrder(CamelModel):
    room_id: int
    start_date: date
    end_date: date


class AddressDetails(CamelModel):
    email: EmailStr
    billing_street: str
    billing_street_add: str = ""
    billing_city: str
    billing_postcode: str
    billing_country: str

    @field_validator("billing_street_add", mode="before")
    @classmethod
    def blank_street_add(cls, value):
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value


class CreateOrderRequest(CamelModel):
    rooms_order: list[RoomOrder]
    address_details: AddressDetails


class CreateOrderResponse(CamelModel):
    order_id: int


class PaymentHandleResponse(CamelModel):
    client_secret: str


class HotelSummary(CamelModel):
    id: int
    name: str


class RoomResponse(CamelModel):
    id: int
    name: str
    bed_count: int
    pets_allowed: bool
    price_in_minor_units: int
    hotel: HotelSummary


class RoomListResponse(CamelModel):
    rooms: list[RoomResponse] = Field(default_factory=list)
