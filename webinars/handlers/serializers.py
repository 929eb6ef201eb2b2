"""Serializers for request parsing and response shaping.

Seat counts are accepted as text and handed to the services unparsed;
turning them into numbers is a domain concern.
"""

from rest_framework import serializers


class OrganizeWebinarSerializer(serializers.Serializer):
    """Request body for POST /webinars."""

    title = serializers.CharField(max_length=255)
    seats = serializers.CharField()
    startDate = serializers.DateTimeField()
    endDate = serializers.DateTimeField()


class ChangeSeatsSerializer(serializers.Serializer):
    """Request body for POST /webinars/{webinar_id}/seats."""

    seats = serializers.CharField()


class WebinarCreatedSerializer(serializers.Serializer):
    id = serializers.CharField()


class SeatsUpdatedSerializer(serializers.Serializer):
    message = serializers.CharField()
