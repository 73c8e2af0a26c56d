"""Domain exceptions for the order and payment pipeline."""


class DomainError(Exception):
    """Base class for every domain error."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Input ===


class ValidationError(DomainError):
    """Input that passed the schema but cannot be processed."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validation failed on '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field


# === Persistence ===


class PersistenceError(DomainError):
    """A store operation failed; the enclosing transaction was rolled back."""

    def __init__(self, message: str = "Persistence operation failed", code: str | None = None):
        super().__init__(message=message, code=code or "PERSISTENCE_ERROR")


class InvalidHandleIdError(PersistenceError):
    """The stored payment handle id cannot be parsed."""

    def __init__(self, order_id: int, handle_id: str):
        super().__init__(
            message=f"Stored payment handle id for order {order_id} is malformed: {handle_id!r}",
            code="INVALID_HANDLE_ID",
        )
        self.order_id = order_id
        self.handle_id = handle_id


class DuplicateHandleError(DomainError):
    """A payment handle mapping already exists for the order."""

    def __init__(self, order_id: int):
        super().__init__(
            message=f"Payment handle already recorded for order {order_id}",
            code="DUPLICATE_HANDLE",
        )
        self.order_id = order_id


class NotFoundError(DomainError):
    """The order is missing its customer or its line items."""

    def __init__(self, order_id: int, missing: str):
        super().__init__(
            message=f"Order {order_id} has no {missing}",
            code="ORDER_NOT_FOUND",
        )
        self.order_id = order_id
        self.missing = missing


# === Payment processor ===


class GatewayError(DomainError):
    """The payment processor call failed, was rejected or timed out."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Payment processor {operation} failed: {reason}",
            code="GATEWAY_ERROR",
        )
        self.operation = operation
        self.reason = reason
