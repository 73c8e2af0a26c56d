"""Value objects of the hotel order domain."""

from hotel_api.domain.value_objects.payment_handle_id import PaymentHandleId
from hotel_api.domain.value_objects.stay_range import StayRange

__all__ = [
    "PaymentHandleId",
    "StayRange",
]
