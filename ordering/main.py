#!/usr/bin/env python3
"""
Order management demo

Runs a fixed scenario: builds an order, adds and removes products while a
subscriber reports the running total, totals an independent item list and
releases the product logs.

Usage:
    python -m ordering
    ordering-demo

Author: TM3
Date: 2026-10-19
"""
import logging
import sys
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional

from dotenv import load_dotenv

from ordering.core.config import settings
from ordering.domain import (
    ElectronicProduct,
    FoodProduct,
    Order,
    OrderItemList,
    OrderStatusChanged,
    Product,
)

logger = logging.getLogger(__name__)


@dataclass
class DemoResult:
    """Totals observed while running the demo"""
    notified_totals: List[Decimal] = field(default_factory=list)
    total_after_adding: Decimal = Decimal('0')
    total_after_removing: Decimal = Decimal('0')
    item_list_total: Decimal = Decimal('0')


def run_demo(today: Optional[date] = None) -> DemoResult:
    """Run the scripted order scenario and return what it observed"""
    today = today or date.today()
    result = DemoResult()

    order = Order()

    def on_order_status_changed(sender, event: OrderStatusChanged):
        if isinstance(sender, Order):
            result.notified_totals.append(sender.get_total_cost())
            logger.info(f"Order status changed. Total cost: {sender.get_total_cost()}")

    order.status_changed.subscribe(on_order_status_changed)

    apple = FoodProduct("Apple", Decimal('0.5'), today + timedelta(days=7))
    laptop = ElectronicProduct("Laptop", Decimal('1000'), 12)

    order.add_item(apple)
    order.add_item(laptop)

    result.total_after_adding = order.get_total_cost()
    logger.info(f"Total cost: {result.total_after_adding}")

    order.remove_item(apple)

    result.total_after_removing = order.get_total_cost()
    logger.info(f"Total cost: {result.total_after_removing}")

    order_items = OrderItemList[Product]([
        laptop,
        FoodProduct("Banana", Decimal('0.3'), today + timedelta(days=5)),
    ])

    result.item_list_total = order_items.get_total_cost()
    logger.info(f"Total cost of order items: {result.item_list_total}")

    # Banana is left to the finalizer
    apple.dispose()
    laptop.dispose()

    return result


def main() -> int:
    load_dotenv()
    logging.basicConfig(level=settings.get_log_level(), format=settings.LOG_FORMAT, stream=sys.stdout)

    run_demo()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
