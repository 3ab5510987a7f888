"""
Shared Dependencies for Routers

Lazy-loaded cart engine singleton used by the HTTP adapter.
"""

from typing import Optional, TYPE_CHECKING

from giftcart.config import CartSettings, get_settings

if TYPE_CHECKING:
    from giftcart.cart import CartEngine


_cart_engine: Optional["CartEngine"] = None


def build_engine(settings: CartSettings) -> "CartEngine":
    """Wire catalog, gift policy and notice duration from settings."""
    from giftcart.cart import CartEngine

    return CartEngine(
        catalog=settings.load_catalog(),
        threshold=settings.threshold,
        gift=settings.gift,
        gift_notification_duration=settings.gift_notification_seconds,
    )


def get_cart_engine() -> "CartEngine":
    """Get or create the CartEngine singleton (lazy loaded)"""
    global _cart_engine
    if _cart_engine is None:
        _cart_engine = build_engine(get_settings())
    return _cart_engine


def reset_cart_engine() -> None:
    """Drop the singleton so the next request starts with an empty cart."""
    global _cart_engine
    _cart_engine = None
