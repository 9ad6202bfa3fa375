"""Serializers for transforming domain models to API responses and back."""

from rest_framework import serializers

from events.domain import EventStatus

STATUS_CHOICES = [status.value for status in EventStatus]


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    venue = serializers.CharField()
    price = serializers.DecimalField(
        source="price.amount", max_digits=12, decimal_places=2, coerce_to_string=False
    )
    image = serializers.CharField(allow_null=True)
    max_tickets = serializers.IntegerField(source="max_tickets.value")
    sold_tickets = serializers.IntegerField(source="sold_tickets.value")
    available_tickets = serializers.IntegerField()
    category = serializers.CharField()
    status = serializers.CharField(source="status.value")
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class EventInputSerializer(serializers.Serializer):
    """Admin create/edit payload.

    Only checks types; the field rules (required text, price, capacity) are
    enforced by EventService so they apply to every caller.
    """

    title = serializers.CharField(allow_blank=True)
    description = serializers.CharField(allow_blank=True, required=False)
    date = serializers.CharField(allow_blank=True)
    time = serializers.CharField(allow_blank=True)
    venue = serializers.CharField(allow_blank=True, required=False)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    max_tickets = serializers.IntegerField()
    category = serializers.CharField(allow_blank=True, required=False)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False)
    image = serializers.CharField(allow_null=True, allow_blank=True, required=False)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class DashboardSerializer(serializers.Serializer):
    """Serializer for DashboardStats."""

    total_events = serializers.IntegerField()
    active_events = serializers.IntegerField()
    total_sales = serializers.DecimalField(
        max_digits=14, decimal_places=2, coerce_to_string=False
    )
    total_tickets_sold = serializers.IntegerField()
    total_capacity = serializers.IntegerField()
    occupancy_rate = serializers.FloatField()
