from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")


def find_cart_item(items: Sequence[T], product_id: int) -> Optional[T]:
    """
    Return the line item holding ``product_id`` or ``None``.

    Linear scan over the cart's ordered items, O(n) in the number of lines.
    Carts hold a handful of lines, so no index is kept.
    """
    target = str(product_id)
    for item in items:
        if str(item.product.id) == target:
            return item
    return None


def cart_total(items: Iterable) -> Decimal:
    """Sum of ``cost * quantity`` over the line items."""
    total = Decimal("0")
    for item in items:
        total += Decimal(str(item.product.cost)) * int(item.quantity)
    return total
