"""
Order Item List

A list that only holds products and can total them. It is not tied
to any Order; build one for reporting.

Author: TM3
Date: 2026-10-19
"""
from decimal import Decimal
from typing import Iterable, List, TypeVar

from ordering.domain.product import Product

T = TypeVar('T', bound=Product)


def _check_product(value) -> None:
    if not isinstance(value, Product):
        raise TypeError(f"OrderItemList only holds Product instances, got {type(value).__name__}")


class OrderItemList(List[T]):
    """
    List of products with a total cost

    Example:
        items = OrderItemList[Product]([laptop, banana])
        items.get_total_cost()  # Decimal('1000.3')
    """

    def __init__(self, items: Iterable[T] = ()):
        items = list(items)
        for item in items:
            _check_product(item)
        super().__init__(items)

    def append(self, item: T) -> None:
        _check_product(item)
        super().append(item)

    def insert(self, index, item: T) -> None:
        _check_product(item)
        super().insert(index, item)

    def extend(self, items: Iterable[T]) -> None:
        items = list(items)
        for item in items:
            _check_product(item)
        super().extend(items)

    def __iadd__(self, items: Iterable[T]):
        self.extend(items)
        return self

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = list(value)
            for item in value:
                _check_product(item)
        else:
            _check_product(value)
        super().__setitem__(index, value)

    def get_total_cost(self) -> Decimal:
        """Sum of item prices (0 when empty)"""
        return sum((item.price for item in self), Decimal('0'))
