"""
Serializers for Auth API endpoints.
"""

from rest_framework import serializers

from core.domain.value_objects import MAX_DEVICE_ID_LENGTH


class LoginRequestSerializer(serializers.Serializer):
    """Serializer for login request."""

    email = serializers.EmailField(required=True, max_length=254)
    password = serializers.CharField(required=True, trim_whitespace=False)
    device_id = serializers.CharField(required=True, max_length=MAX_DEVICE_ID_LENGTH)


class SessionTokenResponseSerializer(serializers.Serializer):
    """Serializer for login and refresh responses."""

    token = serializers.CharField()
    remaining_seconds = serializers.IntegerField()
    expires_at = serializers.DateTimeField()


class SessionStatusResponseSerializer(serializers.Serializer):
    """Serializer for check response."""

    email = serializers.EmailField()
    device_id = serializers.CharField()
    remaining_seconds = serializers.IntegerField()
    license_expires_at = serializers.DateTimeField(allow_null=True)


class ValidateSessionRequestSerializer(serializers.Serializer):
    """Serializer for the diagnostic session validation request."""

    email = serializers.EmailField(required=True, max_length=254)
    device_id = serializers.CharField(required=True, max_length=MAX_DEVICE_ID_LENGTH)
    token = serializers.CharField(required=True)


class ValidateSessionResponseSerializer(serializers.Serializer):
    """Serializer for the diagnostic session validation response."""

    valid = serializers.BooleanField()
