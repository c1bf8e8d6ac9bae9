from django.conf import settings
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from apps.users.validators import (
    validate_password as validate_password_rules,
    validate_username as validate_username_rules,
)


class RegisterRequestSerializer(serializers.Serializer):
    username = serializers.CharField()
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    first_name = serializers.CharField(required=False, allow_blank=True, default="")
    last_name = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_username(self, value: str) -> str:
        return validate_username_rules(value)

    def validate_password(self, value: str) -> str:
        return validate_password_rules(value)


class RegisterResponseSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    email = serializers.EmailField()


class ShopperTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Token pair plus the wallet and address state the storefront shows after login."""

    def validate(self, attrs):
        data = super().validate(attrs)
        data["username"] = self.user.username
        data["walletMoney"] = str(self.user.wallet_money)
        data["addressSet"] = self.user.has_set_non_default_address(settings.DEFAULT_ADDRESS)
        return data
