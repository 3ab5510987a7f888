"""
Cart Router

Thin HTTP adapter over the CartEngine for browser front ends.

Response format:
- *_value fields: raw amounts for calculations
- plain fields: display strings with the configured currency symbol
"""
from fastapi import APIRouter, HTTPException, Depends

from giftcart.cart import CartEngine, CartView
from giftcart.config import get_settings
from giftcart.errors import ERROR_GIFT_ENGINE_MANAGED, ERROR_PRODUCT_NOT_FOUND
from giftcart.logging import get_logger
from giftcart.services.money import format_money, to_float
from .deps import get_cart_engine
from .models import AddToCartRequest, ChangeQuantityRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def _format_cart_response(view: CartView, gift_name: str) -> dict:
    """
    Build cart response for the front end.

    Includes the progress hint while below threshold and the banner
    text while the "gift granted" notice is visible.
    """
    symbol = get_settings().currency_symbol

    items = [
        {
            "product_id": line.id,
            "product_name": line.name,
            "quantity": line.quantity,
            "is_gift": line.id == view.gift_id,
            "unit_price_value": to_float(line.price),
            "total_price_value": to_float(line.line_total),
            "unit_price": format_money(line.price, symbol),
            "total_price": format_money(line.line_total, symbol),
        }
        for line in view.lines
    ]

    below_threshold = view.subtotal < view.threshold
    return {
        "items": items,
        "is_empty": view.is_empty,
        "total_items": view.total_items,
        "subtotal_value": to_float(view.subtotal),
        "subtotal": format_money(view.subtotal, symbol),
        "threshold_value": to_float(view.threshold),
        "progress": to_float(view.progress),
        "remaining_value": to_float(view.remaining),
        "has_gift": view.has_gift,
        "gift_hint": (
            f"Add {format_money(view.remaining, symbol)} more to get a FREE {gift_name}!"
            if below_threshold else None
        ),
        "gift_message": (
            f"You got a free {gift_name}!" if view.gift_message_visible else None
        ),
    }


@router.get("/cart")
async def get_cart(engine: CartEngine = Depends(get_cart_engine)):
    """Current cart view."""
    return _format_cart_response(engine.view(), engine.gift.name)


@router.post("/cart/add")
async def add_to_cart(request: AddToCartRequest, engine: CartEngine = Depends(get_cart_engine)):
    """Add one unit of a catalog product."""
    if request.product_id == engine.gift.id:
        raise HTTPException(status_code=400, detail=ERROR_GIFT_ENGINE_MANAGED)
    if not engine.add_product_by_id(request.product_id):
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return _format_cart_response(engine.view(), engine.gift.name)


@router.patch("/cart/item")
async def change_cart_item(request: ChangeQuantityRequest, engine: CartEngine = Depends(get_cart_engine)):
    """Change a line's quantity by delta (reaching 0 removes the line)."""
    if request.product_id == engine.gift.id:
        raise HTTPException(status_code=400, detail=ERROR_GIFT_ENGINE_MANAGED)
    engine.change_quantity(request.product_id, request.delta)
    return _format_cart_response(engine.view(), engine.gift.name)
