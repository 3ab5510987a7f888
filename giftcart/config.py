"""
Cart configuration loaded from environment variables.

A ``.env`` file in the working directory is read first if present.
"""
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import cache
from typing import Optional

from dotenv import load_dotenv

from giftcart.cart.catalog import Catalog, DEFAULT_GIFT
from giftcart.cart.models import Product
from giftcart.errors import (
    ERROR_INVALID_AMOUNT,
    ERROR_INVALID_DURATION,
    ERROR_NEGATIVE_THRESHOLD,
)

load_dotenv()


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _get_decimal(key: str, default: str) -> Decimal:
    """Decimal setting; unparsable or non-finite values raise ValueError."""
    raw = _get_env(key, default)
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"{ERROR_INVALID_AMOUNT}: {key}={raw!r}") from None
    if not value.is_finite():
        raise ValueError(f"{ERROR_INVALID_AMOUNT}: {key}={raw!r}")
    return value


@dataclass(frozen=True)
class CartSettings:
    """Values the cart engine is built from."""
    threshold: Decimal = Decimal("1000")
    gift_id: int = DEFAULT_GIFT.id
    gift_name: str = DEFAULT_GIFT.name
    gift_notification_seconds: float = 3.0
    currency_symbol: str = "₹"
    catalog_path: Optional[str] = None

    def __post_init__(self):
        if self.threshold < 0:
            raise ValueError(ERROR_NEGATIVE_THRESHOLD)
        if self.gift_notification_seconds <= 0:
            raise ValueError(ERROR_INVALID_DURATION)

    @property
    def gift(self) -> Product:
        return Product(id=self.gift_id, name=self.gift_name, price=0)

    def load_catalog(self) -> Catalog:
        """Catalog from ``catalog_path`` or the built-in demo products."""
        if self.catalog_path:
            return Catalog.from_json(self.catalog_path)
        return Catalog()


def load_settings() -> CartSettings:
    """Read settings from the environment (no caching)."""
    return CartSettings(
        threshold=_get_decimal("GIFT_THRESHOLD", "1000"),
        gift_id=int(_get_env("GIFT_PRODUCT_ID", str(DEFAULT_GIFT.id))),
        gift_name=_get_env("GIFT_PRODUCT_NAME", DEFAULT_GIFT.name),
        gift_notification_seconds=float(_get_env("GIFT_NOTIFICATION_SECONDS", "3")),
        currency_symbol=_get_env("CURRENCY_SYMBOL", "₹"),
        catalog_path=_get_env("CATALOG_PATH"),
    )


@cache
def get_settings() -> CartSettings:
    """Settings singleton."""
    return load_settings()
