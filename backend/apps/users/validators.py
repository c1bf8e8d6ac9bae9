import re

from django.conf import settings
from rest_framework import serializers

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")

ADDRESS_MIN_LENGTH = 20
ADDRESS_MAX_LENGTH = 128


def validate_username(value: str) -> str:
    """At least 4 characters; letters, digits, dot, dash and underscore only."""
    if value is None:
        raise serializers.ValidationError("Username is required.")
    trimmed = value.strip()
    if len(trimmed) < 4:
        raise serializers.ValidationError(
            "Username must be at least 4 characters long."
        )
    if not _USERNAME_PATTERN.match(trimmed):
        raise serializers.ValidationError(
            "Username may contain only letters, numbers, '.', '-' and '_'."
        )
    return trimmed


def validate_password(value: str) -> str:
    """
    Minimum length of 8 characters with at least one letter and one number.
    """
    if value is None:
        raise serializers.ValidationError("Password is required.")
    if len(value) < 8:
        raise serializers.ValidationError(
            "Password must be at least 8 characters long."
        )
    if not any(ch.isalpha() for ch in value) or not any(ch.isdigit() for ch in value):
        raise serializers.ValidationError(
            "Password must contain at least 1 letter and 1 number."
        )
    return value


def validate_address(value: str) -> str:
    if value is None:
        raise serializers.ValidationError("Address is required.")
    trimmed = value.strip()
    if not ADDRESS_MIN_LENGTH <= len(trimmed) <= ADDRESS_MAX_LENGTH:
        raise serializers.ValidationError(
            f"Address must be between {ADDRESS_MIN_LENGTH} and {ADDRESS_MAX_LENGTH} characters long."
        )
    if trimmed == settings.DEFAULT_ADDRESS:
        raise serializers.ValidationError("Address must not be the default placeholder.")
    return trimmed
