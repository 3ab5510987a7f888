"""Tests for configuration loading"""
import json
import os
from decimal import Decimal
from unittest.mock import patch

import pytest

from giftcart.config import CartSettings, load_settings
from giftcart.routers.deps import build_engine


def test_defaults():
    with patch.dict(os.environ, {}, clear=True):
        settings = load_settings()

    assert settings.threshold == Decimal("1000")
    assert settings.gift.id == 99
    assert settings.gift.name == "Wireless Mouse"
    assert settings.gift_notification_seconds == 3.0
    assert settings.currency_symbol == "₹"
    assert settings.catalog_path is None


def test_env_overrides(tmp_path):
    catalog_file = tmp_path / "catalog.json"
    catalog_file.write_text(json.dumps([{"id": 5, "name": "Camera", "price": 700}]), encoding="utf-8")
    env = {
        "GIFT_THRESHOLD": "1500",
        "GIFT_PRODUCT_ID": "1000",
        "GIFT_PRODUCT_NAME": "Tote Bag",
        "GIFT_NOTIFICATION_SECONDS": "5",
        "CURRENCY_SYMBOL": "$",
        "CATALOG_PATH": str(catalog_file),
    }
    with patch.dict(os.environ, env, clear=True):
        settings = load_settings()

    engine = build_engine(settings)
    assert engine.threshold == Decimal("1500")
    assert engine.gift.name == "Tote Bag"
    assert [p.name for p in engine.catalog] == ["Camera"]


def test_blank_values_fall_back_to_defaults():
    with patch.dict(os.environ, {"GIFT_THRESHOLD": "  ", "CATALOG_PATH": ""}, clear=True):
        settings = load_settings()

    assert settings.threshold == Decimal("1000")
    assert settings.catalog_path is None


def test_invalid_settings():
    with pytest.raises(ValueError):
        CartSettings(threshold=Decimal("-1"))
    with pytest.raises(ValueError):
        CartSettings(gift_notification_seconds=0)


@pytest.mark.parametrize("raw", ["1,000", "abc", "NaN", "Infinity"])
def test_unparsable_threshold_rejected(raw):
    """A bad threshold must not silently become 0"""
    with patch.dict(os.environ, {"GIFT_THRESHOLD": raw}, clear=True):
        with pytest.raises(ValueError, match="GIFT_THRESHOLD"):
            load_settings()


def test_decimal_threshold_parsed_exactly():
    with patch.dict(os.environ, {"GIFT_THRESHOLD": "999.99"}, clear=True):
        settings = load_settings()

    assert settings.threshold == Decimal("999.99")
