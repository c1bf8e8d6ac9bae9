from rest_framework import serializers

from apps.catalog.serializers import ProductReadSerializer


class CartProductSerializer(serializers.Serializer):
    product = ProductReadSerializer()
    quantity = serializers.IntegerField()


class CartReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    email = serializers.EmailField()
    cartItems = CartProductSerializer(source="items", many=True)
    total = serializers.CharField()


class CartItemAddSerializer(serializers.Serializer):
    productId = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)


class CartItemUpdateSerializer(serializers.Serializer):
    # quantity 0 removes the line
    productId = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=0)
