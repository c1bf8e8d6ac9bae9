from __future__ import annotations

from typing import List, Optional

from apps.api.exceptions import NotFoundError
from apps.common import get_logger
from .dtos import ProductDTO
from .mappers import ProductMapper
from .protocols import ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(self, products: ProductRepositoryProtocol):
        self.products = products
        self.logger = logger.bind(service="ProductService")

    def list_products(self, category: Optional[str] = None) -> List[ProductDTO]:
        self.logger.debug("Listing products", category=category)
        qs = self.products.list(category=category) if category else self.products.list()
        return ProductMapper.many_to_dto(qs)

    def get_product(self, product_id: int) -> ProductDTO:
        self.logger.debug("Fetching product", product_id=product_id)
        product = self.products.get(id=product_id)
        if not product:
            self.logger.info("Product not found", product_id=product_id)
            raise NotFoundError("Product not found", details={"id": str(product_id)})
        return ProductMapper.to_dto(product)
