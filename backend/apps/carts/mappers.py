"""Model -> DTO mapping for carts. Line items are passed in explicitly so the
DTO always reflects the in-memory state the service just persisted."""
from decimal import Decimal
from typing import Iterable, List, Optional

from apps.catalog.mappers import ProductMapper

from .dtos import CartDTO, CartProductDTO
from .models import Cart, CartProduct
from .utils import cart_total


class CartProductMapper:
    def __init__(self, product_mapper: Optional[ProductMapper] = None) -> None:
        self.product_mapper = product_mapper or ProductMapper()

    def to_dto(self, cp: CartProduct) -> CartProductDTO:
        return CartProductDTO(
            product=self.product_mapper.to_dto(cp.product), quantity=cp.quantity
        )

    def many_to_dto(self, items: Iterable[CartProduct]) -> List[CartProductDTO]:
        return [self.to_dto(i) for i in items]


class CartMapper:
    def __init__(self, cart_product_mapper: Optional[CartProductMapper] = None) -> None:
        self.cart_product_mapper = cart_product_mapper or CartProductMapper()

    def to_dto(self, cart: Cart, items: Iterable[CartProduct]) -> CartDTO:
        items = list(items)
        return CartDTO(
            id=cart.id,
            email=cart.email,
            items=self.cart_product_mapper.many_to_dto(items),
            total=str(cart_total(items).quantize(Decimal("0.01"))),
        )
