"""Serializers for request bodies and domain model responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    code = serializers.IntegerField()
    title = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    event_code = serializers.IntegerField()
    seat = serializers.CharField()
    tax_id = serializers.CharField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()


class EventCreateSerializer(serializers.Serializer):
    """Input format for POST /api/events.

    Length limits are left to the domain so that they surface as
    FIELD_TOO_LONG like every other caller sees them.
    """

    code = serializers.IntegerField(min_value=0)
    title = serializers.CharField()
    date = serializers.RegexField(r"^\d{2}/\d{2}/\d{4}$")
    time = serializers.RegexField(r"^\d{2}:\d{2}$")


class TicketCreateSerializer(serializers.Serializer):
    """Input format for POST /api/events/{code}/tickets."""

    seat = serializers.CharField()
    tax_id = serializers.CharField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
