from payments.handlers.views import (
    CheckoutFormView,
    CheckoutView,
    PaymentFailureView,
    PaymentStatusView,
    PaymentSuccessView,
)

__all__ = [
    "CheckoutFormView",
    "CheckoutView",
    "PaymentFailureView",
    "PaymentStatusView",
    "PaymentSuccessView",
]
