"""
Order exceptions

Error types raised while working with orders.

Author: TM3
Date: 2026-10-19
"""


class OrderException(Exception):
    """Base error for order operations"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidOrderItemError(OrderException):
    """An order was given something that is not a product"""
