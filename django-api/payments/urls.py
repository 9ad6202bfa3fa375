from django.urls import path

from payments.handlers import (
    CheckoutFormView,
    CheckoutView,
    PaymentFailureView,
    PaymentStatusView,
    PaymentSuccessView,
)

urlpatterns = [
    path("events/<str:event_id>/checkout", CheckoutView.as_view(), name="checkout"),
    path(
        "events/<str:event_id>/checkout/form",
        CheckoutFormView.as_view(),
        name="checkout-form",
    ),
    path("payment/success", PaymentSuccessView.as_view(), name="payment-success"),
    path("payment/failure", PaymentFailureView.as_view(), name="payment-failure"),
    path(
        "payment/status/<str:transaction_id>",
        PaymentStatusView.as_view(),
        name="payment-status",
    ),
]
