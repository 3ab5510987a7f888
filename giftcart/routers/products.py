"""Catalog listing."""
from fastapi import APIRouter, Depends

from giftcart.cart import CartEngine
from giftcart.config import get_settings
from giftcart.services.money import format_money, to_float
from .deps import get_cart_engine

router = APIRouter(tags=["products"])


@router.get("/products")
async def get_products(engine: CartEngine = Depends(get_cart_engine)):
    """Catalog products in display order."""
    symbol = get_settings().currency_symbol
    return [
        {
            "id": product.id,
            "name": product.name,
            "price_value": to_float(product.price),
            "price": format_money(product.price, symbol),
        }
        for product in engine.catalog
    ]
