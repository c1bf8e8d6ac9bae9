from __future__ import annotations

from django.conf import settings

from apps.catalog.mappers import ProductMapper
from apps.catalog.repositories import ProductRepository
from apps.users.repositories import UserRepository

from .mappers import CartMapper, CartProductMapper
from .repositories import CartProductRepository, CartRepository
from .services import CartService


def build_cart_service() -> CartService:
    cart_mapper = CartMapper(CartProductMapper(ProductMapper()))
    return CartService(
        carts=CartRepository(),
        cart_products=CartProductRepository(),
        products=ProductRepository(),
        users=UserRepository(),
        cart_mapper=cart_mapper,
        default_address=settings.DEFAULT_ADDRESS,
    )
