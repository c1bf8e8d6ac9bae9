from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, TYPE_CHECKING

from .models import Cart, CartProduct

if TYPE_CHECKING:
    from apps.carts.dtos import CartDTO
    from apps.catalog.models import Product
    from apps.users.models import User


class CartRepositoryProtocol(Protocol):
    def get_for_email(self, email: str) -> Optional[Cart]:
        ...

    def create(self, **data) -> Cart:
        ...

    def save(self, cart: Cart, update_fields: Optional[Iterable[str]] = None) -> Cart:
        ...


class CartProductRepositoryProtocol(Protocol):
    def list_for_cart(self, cart: Cart) -> List[CartProduct]:
        ...

    def create(self, **data) -> CartProduct:
        ...

    def save(
        self, item: CartProduct, update_fields: Optional[Iterable[str]] = None
    ) -> CartProduct:
        ...

    def delete(self, item: CartProduct) -> None:
        ...

    def delete_for_cart(self, cart: Cart) -> None:
        ...


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]:
        ...


class UserRepositoryProtocol(Protocol):
    def save(self, user: "User", update_fields: Optional[Iterable[str]] = None) -> "User":
        ...


class CartMapperProtocol(Protocol):
    def to_dto(self, cart: Cart, items: Iterable[CartProduct]) -> "CartDTO":
        ...
