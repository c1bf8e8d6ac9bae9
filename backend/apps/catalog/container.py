from __future__ import annotations

from .repositories import ProductRepository
from .services import ProductService


def build_product_service() -> ProductService:
    return ProductService(products=ProductRepository())
