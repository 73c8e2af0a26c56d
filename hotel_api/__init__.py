"""Hotel room orders with exactly one Stripe payment handle per order."""

__version__ = "0.1.0"
