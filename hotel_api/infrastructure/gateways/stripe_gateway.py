import asyncio
import logging
from typing import Any, Callable, Sequence

import stripe

from hotel_api.application.interfaces.payment_gateway import PaymentGateway, PaymentHandle
from hotel_api.domain.errors import GatewayError
from hotel_api.infrastructure.circuit_breaker import CircuitBreakerError, payment_breaker

logger = logging.getLogger(__name__)


class StripePaymentGateway(PaymentGateway):
    def __init__(
        self,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        max_network_retries: int = 0,
        client: Any | None = None,
    ) -> None:
        if client is None and api_key:
            # The SDK is synchronous; its own timeout bounds the socket while
            # wait_for below bounds the awaiting request.
            client = stripe.StripeClient(
                api_key,
                http_client=stripe.RequestsClient(timeout=timeout_seconds),
                max_network_retries=max_network_retries,
            )
        self._client = client
        self._timeout_seconds = timeout_seconds

    async def create_handle(
        self,
        amount: int,
        currency: str,
        receipt_email: str,
        method_types: Sequence[str],
        metadata: dict[str, str] | None = None,
        idempotency_key: str | None = None,
    ) -> PaymentHandle:
        params = {
            "amount": amount,
            "currency": currency.lower(),
            "receipt_email": receipt_email,
            "payment_method_types": list(method_types),
        }
        if metadata:
            params["metadata"] = metadata
        options = {"idempotency_key": idempotency_key} if idempotency_key else {}
        payment_intents = self._require_client("create").payment_intents
        intent = await self._call("create", payment_intents.create, params=params, options=options)
        return self._to_handle(intent)

    async def retrieve_handle(self, handle_id: str) -> PaymentHandle:
        payment_intents = self._require_client("retrieve").payment_intents
        intent = await self._call("retrieve", payment_intents.retrieve, handle_id)
        return self._to_handle(intent)

    def _require_client(self, operation: str) -> Any:
        if self._client is None:
            logger.error("Stripe secret key is not configured", extra={"operation": operation})
            raise GatewayError(operation, "not configured")
        return self._client

    async def _call(self, operation: str, func: Callable[..., Any], *args, **kwargs) -> Any:
        """
        Run a Stripe API call in a worker thread, protected by the circuit breaker.

        A timeout does not mean the processor did nothing: the intent may
        exist server-side, so it is reported as a failure, not as "absent".

        Raises:
            GatewayError: on timeout, open circuit or any Stripe API error
        """
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(payment_breaker.call, func, *args, **kwargs),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error(
                "Stripe call timed out",
                extra={"operation": operation, "timeout_seconds": self._timeout_seconds},
            )
            raise GatewayError(operation, "timeout") from e
        except CircuitBreakerError as e:
            logger.error(
                "Stripe circuit breaker is open - service unavailable",
                extra={"operation": operation, "circuit_state": str(e)},
            )
            raise GatewayError(operation, "circuit open") from e
        except stripe.StripeError as e:
            logger.error(
                "Stripe API error",
                exc_info=e,
                extra={"operation": operation, "stripe_code": getattr(e, "code", None)},
            )
            raise GatewayError(operation, "processor error") from e

    @staticmethod
    def _to_handle(intent: Any) -> PaymentHandle:
        return PaymentHandle(
            id=intent["id"],
            client_secret=intent["client_secret"],
            amount=intent["amount"],
            currency=intent["currency"],
            status=intent["status"],
        )
