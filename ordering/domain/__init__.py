"""
Domain Layer - Business Entities

Products, orders, order events and the order item list.

Author: TM3
Date: 2026-10-19
"""
from ordering.domain.product import Product, FoodProduct, ElectronicProduct
from ordering.domain.events import EventHook, OrderStatusChanged
from ordering.domain.order import IOrder, Order
from ordering.domain.item_list import OrderItemList

__all__ = [
    'Product', 'FoodProduct', 'ElectronicProduct',
    'EventHook', 'OrderStatusChanged',
    'IOrder', 'Order',
    'OrderItemList',
]
