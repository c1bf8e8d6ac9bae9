import unittest
from decimal import Decimal

from apps.api.exceptions import NotFoundError
from apps.catalog.services import ProductService
from apps.catalog.tests.test_mappers import StubProduct


class FakeProductRepository:
    def __init__(self, products):
        self._products = list(products)

    def get(self, **filters):
        for product in self._products:
            if all(getattr(product, k) == v for k, v in filters.items()):
                return product
        return None

    def list(self, **filters):
        return [
            p for p in self._products
            if all(getattr(p, k) == v for k, v in filters.items())
        ]


class ProductServiceUnitTests(unittest.TestCase):
    def setUp(self):
        self.service = ProductService(
            products=FakeProductRepository(
                [
                    StubProduct(1, "Widget", Decimal("10.00"), category="Tools"),
                    StubProduct(2, "Gadget", Decimal("5.00"), category="Electronics"),
                ]
            )
        )

    def test_list_products_returns_all_without_filter(self):
        self.assertEqual([p.id for p in self.service.list_products()], [1, 2])

    def test_list_products_filters_by_category(self):
        products = self.service.list_products(category="Electronics")
        self.assertEqual([p.name for p in products], ["Gadget"])

    def test_get_product_returns_dto(self):
        self.assertEqual(self.service.get_product(1).cost, "10.00")

    def test_get_missing_product_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.service.get_product(99)
        self.assertEqual(ctx.exception.status_code, 404)
