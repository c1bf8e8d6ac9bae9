from apps.common.repository import GenericRepository
from .models import Cart, CartProduct


class CartRepository(GenericRepository[Cart]):
    def __init__(self):
        super().__init__(Cart)

    def get_for_email(self, email: str):
        return self.model.objects.filter(email=email).first()


class CartProductRepository(GenericRepository[CartProduct]):
    def __init__(self):
        super().__init__(CartProduct)

    def list_for_cart(self, cart: Cart):
        return list(
            self.model.objects.filter(cart=cart)
            .select_related("product")
            .order_by("id")
        )

    def delete_for_cart(self, cart: Cart) -> None:
        self.model.objects.filter(cart=cart).delete()
