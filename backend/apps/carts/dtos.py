from dataclasses import dataclass
from typing import List

from apps.catalog.dtos import ProductDTO


@dataclass
class CartProductDTO:
    product: ProductDTO
    quantity: int


@dataclass
class CartDTO:
    id: int
    email: str
    items: List[CartProductDTO]
    total: str
