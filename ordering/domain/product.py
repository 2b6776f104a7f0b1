"""
Product Domain Model

Represents the products that can be placed in an order.
Product is the common base; FoodProduct and ElectronicProduct add
their own fields.

Every product owns a ProductLog (one <name>.log file) from construction
until it is disposed. Call dispose() or use the product as a context
manager; if neither happens the finalizer releases the log instead.

Author: TM3
Date: 2026-10-19
"""
import logging
from abc import ABC
from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ordering.core.config import settings
from ordering.core.product_log import ProductLog

logger = logging.getLogger(__name__)


class Product(BaseModel, ABC):
    """
    Product base model - a purchasable item with a name and a price

    Fields:
        name: Product name (also names the product log file, so it cannot change)
        price: Unit price, never negative

    Product itself cannot be instantiated; use one of the subclasses.
    Copies (copy.copy, copy.deepcopy, model_copy) open their own product log.
    """

    name: str = Field(..., description="Product name", min_length=1, frozen=True)
    price: Decimal = Field(..., description="Product price", ge=0)

    model_config = ConfigDict(validate_assignment=True)

    _log: Optional[ProductLog] = PrivateAttr(default=None)
    _disposed: bool = PrivateAttr(default=False)

    def __init__(self, **data):
        if type(self) is Product:
            raise TypeError("Product is abstract; use FoodProduct or ElectronicProduct")
        super().__init__(**data)
        self._open_log()

    def _open_log(self) -> None:
        self._log = ProductLog(self.name, settings.LOG_DIR, settings.LOG_ENCODING)
        self._disposed = False
        self._log.write(f"Created {type(self).__name__} '{self.name}' priced {self.price}")

    def __copy__(self):
        copied = super().__copy__()
        copied._open_log()
        return copied

    def __deepcopy__(self, memo=None):
        memo = {} if memo is None else memo
        # The log handle is never shared or deep-copied
        memo[id(self._log)] = None
        copied = super().__deepcopy__(memo)
        copied._open_log()
        return copied

    def model_copy(self, *, update=None, deep: bool = False):
        copied = super().model_copy(update=update, deep=deep)
        if update and 'name' in update and copied.name != self.name:
            # Copy was opened under the old name; move it to the new one
            copied._log.close()
            copied._open_log()
        return copied

    def __del__(self):
        # Fallback path: only reached when dispose() was never called
        if getattr(self, "_disposed", True) or getattr(self, "_log", None) is None:
            return
        self._dispose(disposing=False)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False

    @property
    def disposed(self) -> bool:
        """Whether the product log has been released"""
        return self._disposed

    @property
    def log_path(self):
        """Path of this product's log file"""
        return self._log.path if self._log is not None else None

    def dispose(self) -> None:
        """Release the product log. Calling it again does nothing."""
        self._dispose(disposing=True)

    def _dispose(self, disposing: bool) -> None:
        if self._disposed:
            return

        if disposing:
            logger.info(f"Destructor called for {self.name}. Releasing unmanaged resources.")
        else:
            logger.warning(
                f"Destructor called for {self.name} by finalizer (dispose() was never called). "
                f"Releasing unmanaged resources."
            )

        if self._log is not None:
            self._log.write("Released by dispose()" if disposing else "Released by finalizer")
            self._log.close()

        self._disposed = True

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        data['price'] = float(data['price'])
        return data


class FoodProduct(Product):
    """
    Food product - adds an expiration date

    Fields:
        expiration_date: Last day the product can be sold
    """

    kind: Literal['food'] = 'food'
    expiration_date: date = Field(..., description="Expiration date")

    def __init__(self, name: str, price, expiration_date: date, **data):
        super().__init__(name=name, price=price, expiration_date=expiration_date, **data)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['expiration_date'] = self.expiration_date.isoformat()
        return data


class ElectronicProduct(Product):
    """
    Electronic product - adds a warranty period

    Fields:
        warranty_months: Warranty length in months
    """

    kind: Literal['electronic'] = 'electronic'
    warranty_months: int = Field(..., description="Warranty in months", ge=0)

    def __init__(self, name: str, price, warranty_months: int, **data):
        super().__init__(name=name, price=price, warranty_months=warranty_months, **data)
