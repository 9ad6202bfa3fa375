from payments.domain.models import (
    SIGNED_FIELD_NAMES,
    CheckoutForm,
    PaymentRequest,
    PaymentResponse,
    PaymentStatus,
    format_amount,
)

__all__ = [
    "SIGNED_FIELD_NAMES",
    "CheckoutForm",
    "PaymentRequest",
    "PaymentResponse",
    "PaymentStatus",
    "format_amount",
]
