"""
Pytest fixtures and configuration for ordering tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2026-10-19
"""
import pytest
from datetime import date, timedelta
from decimal import Decimal

from ordering.core.config import settings
from ordering.domain import ElectronicProduct, FoodProduct, Order


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    """
    Sends every product log file to a temporary directory

    Scope: function (autouse, so no test writes logs into the working dir)
    """
    path = tmp_path / "logs"
    monkeypatch.setattr(settings, "LOG_DIR", path)
    return path


@pytest.fixture
def apple():
    """
    Provides a food product priced 0.5

    Disposed automatically after the test
    """
    product = FoodProduct("Apple", Decimal('0.5'), date.today() + timedelta(days=7))
    yield product
    product.dispose()


@pytest.fixture
def laptop():
    """
    Provides an electronic product priced 1000

    Disposed automatically after the test
    """
    product = ElectronicProduct("Laptop", Decimal('1000'), 12)
    yield product
    product.dispose()


@pytest.fixture
def banana():
    """Provides a food product priced 0.3"""
    product = FoodProduct("Banana", Decimal('0.3'), date.today() + timedelta(days=5))
    yield product
    product.dispose()


@pytest.fixture
def order():
    """Provides an empty order"""
    return Order()


@pytest.fixture
def recorded_events(order):
    """
    Subscribes a recorder to the order and returns what it saw

    Each entry is (sender, event, total observed inside the handler)
    """
    events = []

    def record(sender, event):
        events.append((sender, event, sender.get_total_cost()))

    order.status_changed.subscribe(record)
    return events
