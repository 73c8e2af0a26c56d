from dataclasses import dataclass
from typing import Sequence


@dataclass
class PaymentHandle:
    id: str
    client_secret: str
    amount: int
    currency: str
    status: str


class PaymentGateway:
    async def create_handle(
        self,
        amount: int,
        currency: str,
        receipt_email: str,
        method_types: Sequence[str],
        metadata: dict[str, str] | None = None,
        idempotency_key: str | None = None,
    ) -> PaymentHandle:
        raise NotImplementedError

    async def retrieve_handle(self, handle_id: str) -> PaymentHandle:
        raise NotImplementedError
