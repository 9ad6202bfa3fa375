"""eSewa ePay v2 request preparation and gateway handoff.

A payment request is signed with HMAC-SHA256 over
``total_amount=<t>,transaction_uuid=<u>,product_code=<p>`` and handed to the
gateway as a browser form POST. The gateway recomputes the signature with the
same shared secret and field order, so the rendering of each value matters.

The callback helpers at the bottom do NOT verify anything: ``verify_payment``
trusts the ``status`` the browser brings back and ``get_payment_status``
always reports success. Production use requires a server-side status check
against the gateway, which this module does not perform.
"""

import base64
import hashlib
import hmac
import logging
import secrets
import string
import time
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from django.conf import settings
from django.template.loader import render_to_string

from payments.domain import (
    SIGNED_FIELD_NAMES,
    CheckoutForm,
    PaymentRequest,
    PaymentResponse,
    PaymentStatus,
    format_amount,
)

logger = logging.getLogger(__name__)

TRANSACTION_PREFIX = "TXN"
CHECKOUT_PATH = "/epay/main"
CHECKOUT_TEMPLATE = "payments/esewa_checkout.html"
TRANSACTION_ID_PARAMS = ("transaction_uuid", "transactionId")

_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


def _config() -> dict[str, str]:
    return settings.ESEWA


def generate_transaction_uuid() -> str:
    """Return ``TXN-<epoch ms>-<9 random base36 chars>``.

    Unique with high probability only; no check against earlier ids.
    """
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(9))
    return f"{TRANSACTION_PREFIX}-{millis}-{suffix}"


def create_signature(
    total_amount: Decimal,
    transaction_uuid: str,
    product_code: str,
    secret_key: str | None = None,
) -> str:
    if secret_key is None:
        secret_key = _config()["SECRET_KEY"]
    message = (
        f"total_amount={format_amount(total_amount)},"
        f"transaction_uuid={transaction_uuid},"
        f"product_code={product_code}"
    )
    digest = hmac.new(
        key=secret_key.encode("utf-8"),
        msg=message.encode("utf-8"),
        digestmod=hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def prepare_payment(amount: Decimal, product_code: str) -> PaymentRequest:
    """Build a signed request for amount. No tax or fee model applies."""
    config = _config()
    amount = Decimal(str(amount))
    tax_amount = Decimal(0)
    service_charge = Decimal(0)
    delivery_charge = Decimal(0)
    total_amount = amount + tax_amount + service_charge + delivery_charge
    transaction_uuid = generate_transaction_uuid()

    request = PaymentRequest(
        amount=amount,
        tax_amount=tax_amount,
        total_amount=total_amount,
        transaction_uuid=transaction_uuid,
        product_code=product_code,
        product_service_charge=service_charge,
        product_delivery_charge=delivery_charge,
        success_url=config["SUCCESS_URL"],
        failure_url=config["FAILURE_URL"],
        signed_field_names=SIGNED_FIELD_NAMES,
        signature=create_signature(total_amount, transaction_uuid, product_code),
    )
    logger.info(
        "Prepared payment %s for %s (total %s)",
        transaction_uuid,
        product_code,
        format_amount(total_amount),
    )
    return request


def build_checkout_form(payment_request: PaymentRequest) -> CheckoutForm:
    config = _config()
    fields = payment_request.to_form_fields()
    fields["merchant_id"] = config["MERCHANT_ID"]
    return CheckoutForm(action=f"{config['BASE_URL']}{CHECKOUT_PATH}", fields=fields)


def initialize_payment(payment_request: PaymentRequest) -> PaymentResponse:
    """Render the auto-submitting form that sends the customer to the gateway.

    The result says whether the handoff could be prepared, never whether the
    payment went through.
    """
    try:
        form = build_checkout_form(payment_request)
        content = render_to_string(CHECKOUT_TEMPLATE, {"form": form})
    except Exception:
        logger.exception(
            "eSewa payment initialization failed for %s",
            payment_request.transaction_uuid,
        )
        return PaymentResponse(
            status=PaymentStatus.FAILURE,
            message="Payment initialization failed. Please try again.",
        )
    return PaymentResponse(
        status=PaymentStatus.SUCCESS,
        message="Redirecting to eSewa payment gateway...",
        transaction_id=payment_request.transaction_uuid,
        content=content,
    )


def extract_transaction_id(params: Mapping[str, Any]) -> str | None:
    """Transaction id from redirect-back query parameters, if any."""
    for name in TRANSACTION_ID_PARAMS:
        value = params.get(name)
        if value:
            return value
    return None


def verify_payment(response_data: Mapping[str, Any]) -> PaymentResponse:
    """Interpret the parameters the gateway redirected back with.

    Unauthenticated: the status is taken at face value.
    """
    if response_data.get("status") == "COMPLETE":
        return PaymentResponse(
            status=PaymentStatus.SUCCESS,
            message="Payment completed successfully",
            transaction_id=response_data.get("transaction_uuid"),
        )
    return PaymentResponse(
        status=PaymentStatus.FAILURE,
        message="Payment was not completed",
    )


def get_payment_status(transaction_id: str) -> PaymentResponse:
    """Stub status lookup; always reports success."""
    return PaymentResponse(
        status=PaymentStatus.SUCCESS,
        message="Payment verified successfully",
        transaction_id=transaction_id,
    )
