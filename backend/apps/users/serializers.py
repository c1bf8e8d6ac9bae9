from rest_framework import serializers

from .validators import validate_address


class UserProfileSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    email = serializers.EmailField()
    first_name = serializers.CharField(allow_blank=True)
    last_name = serializers.CharField(allow_blank=True)
    walletMoney = serializers.CharField(source="wallet_money")
    address = serializers.CharField()
    addressSet = serializers.BooleanField(source="address_set")
    date_joined = serializers.CharField(allow_null=True)


class AddressUpdateSerializer(serializers.Serializer):
    address = serializers.CharField(trim_whitespace=True)

    def validate_address(self, value: str) -> str:
        return validate_address(value)
