"""Pytest configuration and fixtures"""
import os
from typing import Callable, List, Optional

import pytest

# Set test environment variables
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("GIFT_THRESHOLD", "1000")
os.environ.setdefault("CURRENCY_SYMBOL", "₹")

from giftcart.cart import CartEngine, Catalog, Product  # noqa: E402


class ManualHandle:
    """Timer handle driven by ManualScheduler."""

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler with a hand-advanced clock."""

    def __init__(self):
        self.now = 0.0
        self.handles: List[ManualHandle] = []

    def time(self) -> float:
        return self.now

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def active(self) -> List[ManualHandle]:
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due callbacks in order."""
        self.now += seconds
        due = sorted(
            (h for h in self.handles if not h.cancelled and h.when <= self.now),
            key=lambda h: h.when,
        )
        for handle in due:
            self.handles.remove(handle)
            handle.callback()


@pytest.fixture
def laptop() -> Product:
    return Product(id=1, name="Laptop", price=500)


@pytest.fixture
def smartphone() -> Product:
    return Product(id=2, name="Smartphone", price=300)


@pytest.fixture
def headphones() -> Product:
    return Product(id=3, name="Headphones", price=100)


@pytest.fixture
def smartwatch() -> Product:
    return Product(id=4, name="Smartwatch", price=150)


@pytest.fixture
def catalog(laptop, smartphone, headphones, smartwatch) -> Catalog:
    """Demo catalog"""
    return Catalog([laptop, smartphone, headphones, smartwatch])


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def engine(catalog, scheduler) -> CartEngine:
    """Engine with threshold 1000, gift id 99, 3s notice"""
    return CartEngine(
        catalog=catalog,
        threshold=1000,
        gift=Product(id=99, name="Wireless Mouse", price=0),
        gift_notification_duration=3,
        scheduler=scheduler,
        clock=scheduler.time,
    )


@pytest.fixture
def make_engine(catalog, scheduler) -> Callable[..., CartEngine]:
    """Factory for engines with custom threshold/gift"""
    def _make(threshold=1000, gift: Optional[Product] = None, duration: float = 3) -> CartEngine:
        return CartEngine(
            catalog=catalog,
            threshold=threshold,
            gift=gift or Product(id=99, name="Wireless Mouse", price=0),
            gift_notification_duration=duration,
            scheduler=scheduler,
            clock=scheduler.time,
        )
    return _make
