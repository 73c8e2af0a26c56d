PAYMENT_METHOD_TYPES = ("card",)

# Stripe PaymentIntent ids look like "pi_3N..."
PAYMENT_HANDLE_PREFIX = "pi_"
