"""HTTP handlers for booking checkout and the gateway's redirect-back pages.

Nothing here authenticates the gateway's redirect. The success page reports
whatever status the query string claims.
"""

import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import Event
from events.domain.errors import DomainError
from events.handlers.errors import error_response
from events.handlers.views import get_event_service
from payments.domain import PaymentRequest, PaymentStatus
from payments.handlers.serializers import (
    CheckoutFormSerializer,
    CheckoutSerializer,
    PaymentResponseSerializer,
    QuantitySerializer,
)
from payments.services import esewa

logger = logging.getLogger(__name__)


def product_code_for(event: Event) -> str:
    return f"EVENT-{event.id}"


def prepare_booking_payment(event: Event, quantity: int) -> PaymentRequest:
    amount = (event.price * quantity).amount
    return esewa.prepare_payment(amount, product_code_for(event))


class CheckoutView(APIView):
    """Handler for POST /api/events/{event_id}/checkout"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        quantity = serializer.validated_data["quantity"]
        try:
            event = get_event_service().get_bookable_event(event_id, quantity)
        except DomainError as e:
            return error_response(e)

        payment_request = prepare_booking_payment(event, quantity)
        form = esewa.build_checkout_form(payment_request)
        logger.info(
            "Checkout %s: %d x event %s",
            payment_request.transaction_uuid,
            quantity,
            event.id,
        )
        return Response(
            {
                "transaction_uuid": payment_request.transaction_uuid,
                "form": CheckoutFormSerializer(form).data,
            },
            status=status.HTTP_201_CREATED,
        )


class CheckoutFormView(APIView):
    """Handler for GET /api/events/{event_id}/checkout/form

    Returns the auto-submitting HTML form that opens the gateway.
    """

    def get(self, request: Request, event_id: str) -> HttpResponse:
        serializer = QuantitySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        quantity = serializer.validated_data["quantity"]
        try:
            event = get_event_service().get_bookable_event(event_id, quantity)
        except DomainError as e:
            return error_response(e)

        payment_request = prepare_booking_payment(event, quantity)
        result = esewa.initialize_payment(payment_request)
        if not result.ok:
            return Response(
                PaymentResponseSerializer(result).data,
                status=status.HTTP_502_BAD_GATEWAY,
            )
        return HttpResponse(result.content, content_type="text/html; charset=utf-8")


class PaymentSuccessView(APIView):
    """Handler for GET /api/payment/success"""

    def get(self, request: Request) -> Response:
        result = esewa.verify_payment(request.query_params)
        # TODO: call EventStore.record_sale once the checkout carries the event
        # id and quantity through to this callback and the callback is verified.
        data = dict(PaymentResponseSerializer(result).data)
        data["transaction_id"] = result.transaction_id or esewa.extract_transaction_id(
            request.query_params
        )
        return Response(data)


class PaymentFailureView(APIView):
    """Handler for GET /api/payment/failure"""

    def get(self, request: Request) -> Response:
        transaction_id = esewa.extract_transaction_id(request.query_params)
        logger.info("Payment failed or cancelled: %s", transaction_id)
        return Response(
            {
                "status": PaymentStatus.FAILURE.value,
                "message": "Unfortunately, your payment could not be processed.",
                "transaction_id": transaction_id,
            }
        )


class PaymentStatusView(APIView):
    """Handler for GET /api/payment/status/{transaction_id}"""

    def get(self, request: Request, transaction_id: str) -> Response:
        result = esewa.get_payment_status(transaction_id)
        return Response(PaymentResponseSerializer(result).data)
