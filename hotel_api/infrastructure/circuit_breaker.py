"""
Shared circuit breaker for payment processor calls.

After fail_max consecutive failures the breaker opens and calls fail fast
until reset_timeout seconds have passed; state changes are logged.
"""

import logging

from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

logger = logging.getLogger(__name__)


def log_circuit_state_change(breaker_name: str, old_state: str, new_state: str):
    logger.warning(
        "Circuit breaker state changed",
        extra={
            "breaker_name": breaker_name,
            "old_state": old_state,
            "new_state": new_state,
        }
    )


class StateChangeLogger(CircuitBreakerListener):
    """Listener for circuit breaker state changes."""

    def __init__(self, name: str):
        self.name = name

    def state_change(self, cb, old_state, new_state):
        log_circuit_state_change(self.name, old_state.name if old_state else "none", new_state.name)


payment_breaker = CircuitBreaker(
    fail_max=5,  # Open circuit after 5 consecutive failures
    reset_timeout=60,  # Wait 60 seconds before attempting recovery
    name="payment_circuit_breaker",
    listeners=[StateChangeLogger("payment")],
)


__all__ = [
    "payment_breaker",
    "CircuitBreakerError",
]
