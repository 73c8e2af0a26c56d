"""Value Object PaymentHandleId - processor-side id of a payment handle."""

from dataclasses import dataclass

from hotel_api.domain.constants import PAYMENT_HANDLE_PREFIX


@dataclass(frozen=True)
class PaymentHandleId:
    """
    Immutable id of a Stripe PaymentIntent (e.g. ``pi_3N0abc...``).

    Ids read back from storage go through ``from_string`` so that a
    corrupted row is caught before it reaches the processor.
    """

    value: str

    MAX_LENGTH = 255

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("payment handle id cannot be empty")

        if not self.value.startswith(PAYMENT_HANDLE_PREFIX) or len(self.value) == len(PAYMENT_HANDLE_PREFIX):
            raise ValueError(f"payment handle id must start with {PAYMENT_HANDLE_PREFIX!r}: {self.value!r}")

        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(f"payment handle id exceeds {self.MAX_LENGTH} characters")

        if any(ch.isspace() for ch in self.value):
            raise ValueError(f"payment handle id contains whitespace: {self.value!r}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "PaymentHandleId":
        return cls(value=value)
