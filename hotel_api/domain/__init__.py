"""
Domain layer - hotel room orders.

Pure business logic with no framework dependencies.

Structure:
- value_objects/: immutable values (StayRange, PaymentHandleId)
- pricing.py: order total computation
- errors.py: domain exceptions
- constants.py: domain constants
"""

from hotel_api.domain.errors import (
    DomainError,
    DuplicateHandleError,
    GatewayError,
    InvalidHandleIdError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from hotel_api.domain.pricing import PricedLineItem, compute_price, nights_between

__all__ = [
    "DomainError",
    "DuplicateHandleError",
    "GatewayError",
    "InvalidHandleIdError",
    "NotFoundError",
    "PersistenceError",
    "PricedLineItem",
    "ValidationError",
    "compute_price",
    "nights_between",
]
