"""
Order Domain Model

An order is an ordered list of products with a running total.
Every add/remove notifies the subscribers of Order.status_changed.

Author: TM3
Date: 2026-10-19
"""
import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Tuple

from ordering.core.exceptions import InvalidOrderItemError
from ordering.domain.events import EventHook, OrderStatusChanged
from ordering.domain.product import Product

logger = logging.getLogger(__name__)


class IOrder(ABC):
    """Operations every order supports"""

    @abstractmethod
    def add_item(self, product: Product) -> None:
        pass

    @abstractmethod
    def remove_item(self, product: Product) -> bool:
        pass

    @abstractmethod
    def get_total_cost(self) -> Decimal:
        pass


class Order(IOrder):
    """
    Order - products in insertion order (duplicates allowed)

    Products are matched by identity, never by field values: two
    separately created "Apple" products are different items.

    Subscribers of status_changed are called synchronously after each
    add_item/remove_item, so they always see the updated order.
    """

    def __init__(self):
        self._items: List[Product] = []
        self.status_changed = EventHook()

    @property
    def items(self) -> Tuple[Product, ...]:
        """Snapshot of the current items"""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        # An empty order is still an order
        return True

    def add_item(self, product: Product) -> None:
        """
        Append a product and notify subscribers

        Raises:
            InvalidOrderItemError: If product is not a Product
        """
        if not isinstance(product, Product):
            raise InvalidOrderItemError(
                f"Cannot add {type(product).__name__} to an order; expected a Product"
            )

        self._items.append(product)
        logger.debug(f"Added {product.name} ({product.price}), {len(self._items)} item(s)")

        self._on_status_changed(OrderStatusChanged(
            action='item_added',
            product_name=product.name,
            item_count=len(self._items),
            total_cost=self.get_total_cost(),
        ))

    def remove_item(self, product: Product) -> bool:
        """
        Remove the first occurrence of product and notify subscribers

        Subscribers are notified even when product was not in the order.

        Returns:
            True if an item was removed
        """
        removed = False
        for index, item in enumerate(self._items):
            if item is product:
                del self._items[index]
                removed = True
                break

        if removed:
            logger.debug(f"Removed {product.name}, {len(self._items)} item(s) left")
        else:
            logger.warning(f"Remove ignored: {getattr(product, 'name', product)!r} is not in the order")

        self._on_status_changed(OrderStatusChanged(
            action='item_removed',
            product_name=str(getattr(product, 'name', product)),
            item_count=len(self._items),
            total_cost=self.get_total_cost(),
            removed=removed,
        ))
        return removed

    def get_total_cost(self) -> Decimal:
        """Sum of item prices (0 for an empty order)"""
        return sum((item.price for item in self._items), Decimal('0'))

    def _on_status_changed(self, event: OrderStatusChanged) -> None:
        """Hook for subclasses; fires status_changed"""
        self.status_changed.fire(self, event)
