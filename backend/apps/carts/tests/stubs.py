from decimal import Decimal

from apps.users.models import User


class StubProduct:
    def __init__(self, product_id: int, name: str, cost, category="Misc", rating=3, image=""):
        self.id = product_id
        self.name = name
        self.cost = Decimal(str(cost))
        self.category = category
        self.rating = rating
        self.image = image


class StubCartProduct:
    def __init__(self, item_id: int, cart, product: StubProduct, quantity: int):
        self.id = item_id
        self.cart = cart
        self.product = product
        self.quantity = quantity


class StubCart:
    def __init__(self, cart_id: int, email: str):
        self.id = cart_id
        self.email = email
        self.saves = 0


class StubUser:
    def __init__(self, email="shopper@example.com", address="ADDRESS_NOT_SET", wallet_money="500"):
        self.id = 1
        self.email = email
        self.address = address
        self.wallet_money = Decimal(str(wallet_money))

    def has_set_non_default_address(self, default_address):
        return User.has_set_non_default_address(self, default_address)
