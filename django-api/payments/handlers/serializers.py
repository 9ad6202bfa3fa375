from rest_framework import serializers

from events.services.event_service import MAX_TICKETS_PER_BOOKING


class CheckoutSerializer(serializers.Serializer):
    """Booking form submitted before handing off to the gateway."""

    name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_TICKETS_PER_BOOKING)


class CheckoutFormSerializer(serializers.Serializer):
    """Serializer for CheckoutForm."""

    action = serializers.CharField()
    method = serializers.CharField()
    target = serializers.CharField()
    fields = serializers.DictField(child=serializers.CharField())


class PaymentResponseSerializer(serializers.Serializer):
    """Serializer for PaymentResponse."""

    status = serializers.CharField(source="status.value")
    message = serializers.CharField()
    transaction_id = serializers.CharField(allow_null=True)


class QuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField(
        min_value=1, max_value=MAX_TICKETS_PER_BOOKING, default=1
    )
