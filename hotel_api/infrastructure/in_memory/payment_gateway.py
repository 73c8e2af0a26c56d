import asyncio
from typing import Sequence
from uuid import uuid4

from hotel_api.application.interfaces.payment_gateway import PaymentGateway, PaymentHandle
from hotel_api.domain.errors import GatewayError


class StubPaymentGateway(PaymentGateway):
    """Processor double: keeps intents in memory and counts the calls it receives."""

    def __init__(self) -> None:
        self.handles: dict[str, PaymentHandle] = {}
        self.metadata: dict[str, dict[str, str]] = {}
        self.create_calls = 0
        self.retrieve_calls = 0
        self.fail_with: str | None = None
        self.idempotent_creates: dict[str, str] = {}

    async def create_handle(
        self,
        amount: int,
        currency: str,
        receipt_email: str,
        method_types: Sequence[str],
        metadata: dict[str, str] | None = None,
        idempotency_key: str | None = None,
    ) -> PaymentHandle:
        self.create_calls += 1
        # Let concurrent callers interleave like a real network call would
        await asyncio.sleep(0)
        if self.fail_with:
            raise GatewayError("create", self.fail_with)
        if idempotency_key in self.idempotent_creates:
            return self.handles[self.idempotent_creates[idempotency_key]]
        intent_id = f"pi_{uuid4().hex[:14]}"
        handle = PaymentHandle(
            id=intent_id,
            client_secret=f"{intent_id}_secret_{uuid4().hex[:10]}",
            amount=amount,
            currency=currency.lower(),
            status="requires_payment_method",
        )
        self.handles[intent_id] = handle
        self.metadata[intent_id] = dict(metadata or {})
        if idempotency_key:
            self.idempotent_creates[idempotency_key] = intent_id
        return handle

    async def retrieve_handle(self, handle_id: str) -> PaymentHandle:
        self.retrieve_calls += 1
        await asyncio.sleep(0)
        if self.fail_with:
            raise GatewayError("retrieve", self.fail_with)
        handle = self.handles.get(handle_id)
        if handle is None:
            raise GatewayError("retrieve", f"no such payment intent: {handle_id}")
        return handle
