"""Payment domain objects exchanged with the eSewa gateway."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

SIGNED_FIELD_NAMES = "total_amount,transaction_uuid,product_code"


def format_amount(value: Decimal) -> str:
    """Render an amount the way the gateway re-renders it when verifying.

    Integral amounts carry no decimal point ("100"), others use the shortest
    plain decimal form ("100.5").
    """
    value = Decimal(str(value))
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


class PaymentStatus(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class PaymentRequest:
    """One signed payment attempt."""

    amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    transaction_uuid: str
    product_code: str
    product_service_charge: Decimal
    product_delivery_charge: Decimal
    success_url: str
    failure_url: str
    signed_field_names: str
    signature: str

    def to_form_fields(self) -> dict[str, str]:
        """Field names and values as the gateway expects them."""
        return {
            "amount": format_amount(self.amount),
            "tax_amount": format_amount(self.tax_amount),
            "total_amount": format_amount(self.total_amount),
            "transaction_uuid": self.transaction_uuid,
            "product_code": self.product_code,
            "product_service_charge": format_amount(self.product_service_charge),
            "product_delivery_charge": format_amount(self.product_delivery_charge),
            "success_url": self.success_url,
            "failure_url": self.failure_url,
            "signed_field_names": self.signed_field_names,
            "signature": self.signature,
        }


@dataclass(frozen=True)
class CheckoutForm:
    """Hidden-field form that hands a payment request to the gateway."""

    action: str
    fields: dict[str, str]
    method: str = "POST"
    target: str = "_blank"


@dataclass(frozen=True)
class PaymentResponse:
    """Outcome of a gateway handoff or callback check.

    For a handoff, SUCCESS only means the redirect was initiated, not that
    the customer paid.
    """

    status: PaymentStatus
    message: str
    transaction_id: str | None = None
    content: str | None = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.status is PaymentStatus.SUCCESS
