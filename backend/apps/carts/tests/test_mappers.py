import unittest

from apps.carts.mappers import CartMapper, CartProductMapper
from apps.carts.tests.stubs import StubCart, StubCartProduct, StubProduct
from apps.catalog.mappers import ProductMapper


class CartMapperTests(unittest.TestCase):
    def setUp(self):
        self.cart = StubCart(2, "owner@example.com")
        self.items = [
            StubCartProduct(1, self.cart, StubProduct(1, "Widget", "5.00"), 3),
            StubCartProduct(2, self.cart, StubProduct(2, "Gadget", "1.50"), 2),
        ]
        self.mapper = CartMapper(CartProductMapper(ProductMapper()))

    def test_to_dto_maps_items_in_order(self):
        dto = self.mapper.to_dto(self.cart, self.items)
        self.assertEqual(dto.id, 2)
        self.assertEqual(dto.email, "owner@example.com")
        self.assertEqual([i.product.id for i in dto.items], [1, 2])
        self.assertEqual([i.quantity for i in dto.items], [3, 2])
        self.assertEqual(dto.items[0].product.cost, "5.00")

    def test_total_is_rendered_with_two_decimals(self):
        self.assertEqual(self.mapper.to_dto(self.cart, self.items).total, "18.00")
        self.assertEqual(self.mapper.to_dto(self.cart, []).total, "0.00")
