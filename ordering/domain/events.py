"""
Order Events

OrderStatusChanged is the payload sent to subscribers every time an
order's items change. EventHook is the subscriber list that delivers it.

Author: TM3
Date: 2026-10-19
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, List, Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class OrderStatusChanged(BaseModel):
    """
    Order status changed event

    Fields:
        action: What happened (item_added, item_removed)
        product_name: Product involved in the change
        item_count: Number of items after the change
        total_cost: Order total after the change
        removed: For item_removed, whether an item was actually removed
        timestamp: When the change happened
    """

    action: Literal['item_added', 'item_removed'] = Field(..., description="Change type")
    product_name: str = Field(..., description="Product name")
    item_count: int = Field(..., description="Items in order after change", ge=0)
    total_cost: Decimal = Field(..., description="Order total after change")
    removed: bool = Field(True, description="Whether the order actually changed")
    timestamp: datetime = Field(default_factory=datetime.now, description="Event time")


EventHandler = Callable[[Any, OrderStatusChanged], None]


class EventHook:
    """
    Synchronous subscriber list

    Handlers are called in registration order with (sender, event).
    The same handler may be subscribed more than once and is then
    called once per subscription.

    Usage:
        order.status_changed.subscribe(on_change)
        order.status_changed += on_change      # same thing
        order.status_changed -= on_change
    """

    def __init__(self):
        self._handlers: List[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> EventHandler:
        if not callable(handler):
            raise TypeError(f"Event handler must be callable, got {type(handler).__name__}")
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: EventHandler) -> None:
        """Remove the most recent subscription of handler; unknown handlers are ignored"""
        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                return

    def fire(self, sender: Any, event: OrderStatusChanged) -> None:
        # Snapshot so handlers can (un)subscribe while being called
        handlers = list(self._handlers)
        logger.debug(f"Dispatching {event.action} to {len(handlers)} handler(s)")
        for handler in handlers:
            handler(sender, event)

    def __iadd__(self, handler: EventHandler) -> "EventHook":
        self.subscribe(handler)
        return self

    def __isub__(self, handler: EventHandler) -> "EventHook":
        self.unsubscribe(handler)
        return self

    def __len__(self) -> int:
        return len(self._handlers)
