"""Cart package: models, catalog, gift rule and engine."""
from .models import Product, CartLine, CartView
from .catalog import Catalog, DEFAULT_GIFT, DEFAULT_PRODUCTS
from .promotion import GiftDecision, GiftPolicy
from .notice import AsyncioScheduler, GiftNotice
from .engine import CartEngine

__all__ = [
    "Product",
    "CartLine",
    "CartView",
    "Catalog",
    "DEFAULT_GIFT",
    "DEFAULT_PRODUCTS",
    "GiftDecision",
    "GiftPolicy",
    "AsyncioScheduler",
    "GiftNotice",
    "CartEngine",
]
