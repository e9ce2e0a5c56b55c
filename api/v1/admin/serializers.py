"""
Serializers for Admin API endpoints.
"""

from rest_framework import serializers

from accounts.domain.license_clock import MAX_DURATION_SECONDS


class CreateAccountRequestSerializer(serializers.Serializer):
    """Serializer for create account request."""

    email = serializers.EmailField(required=True, max_length=254)
    password = serializers.CharField(required=True, trim_whitespace=False)
    duration_seconds = serializers.IntegerField(
        required=True, min_value=1, max_value=MAX_DURATION_SECONDS
    )


class CreateAccountResponseSerializer(serializers.Serializer):
    """Serializer for create account response."""

    email = serializers.EmailField()
    duration_seconds = serializers.IntegerField()
    message = serializers.CharField()


class AccountSerializer(serializers.Serializer):
    """Serializer for AccountDTO."""

    email = serializers.EmailField()
    duration_seconds = serializers.IntegerField()
    activated_at = serializers.DateTimeField(allow_null=True)
    remaining_seconds = serializers.IntegerField(allow_null=True)
    license_expires_at = serializers.DateTimeField(allow_null=True)
    created_at = serializers.DateTimeField()


class ExtendLicenseRequestSerializer(serializers.Serializer):
    """Serializer for extend license request."""

    extra_seconds = serializers.IntegerField(
        required=True, min_value=-MAX_DURATION_SECONDS, max_value=MAX_DURATION_SECONDS
    )

    def validate_extra_seconds(self, value: int) -> int:
        if value == 0:
            raise serializers.ValidationError("extra_seconds must be non-zero")
        return value


class ExtendLicenseResponseSerializer(serializers.Serializer):
    """Serializer for extend license response."""

    email = serializers.EmailField()
    duration_seconds = serializers.IntegerField()
    remaining_seconds = serializers.IntegerField(allow_null=True)
    message = serializers.CharField()
