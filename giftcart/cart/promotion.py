"""Spend-threshold gift rule."""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable

from giftcart.errors import ERROR_GIFT_NOT_FREE, ERROR_NEGATIVE_THRESHOLD
from giftcart.services.money import HUNDRED, percent_of, subtract, to_decimal
from .models import CartLine, Product


class GiftDecision(str, Enum):
    """
    Outcome of evaluating the gift rule.

    Steady states:
        below threshold, no gift   -> KEEP
        at/above threshold, gift   -> KEEP
    Transient states are corrected:
        at/above threshold, no gift -> GRANT
        below threshold, gift       -> REVOKE
    """
    GRANT = "grant"
    REVOKE = "revoke"
    KEEP = "keep"


@dataclass(frozen=True)
class GiftPolicy:
    """Threshold and the free product it unlocks."""
    threshold: Decimal
    gift: Product

    def __post_init__(self):
        object.__setattr__(self, "threshold", to_decimal(self.threshold))
        if self.threshold < 0:
            raise ValueError(ERROR_NEGATIVE_THRESHOLD)
        if self.gift.price != 0:
            raise ValueError(ERROR_GIFT_NOT_FREE)

    def gift_line(self) -> CartLine:
        return CartLine.for_product(self.gift, quantity=1)


def subtotal(lines: Iterable[CartLine]) -> Decimal:
    """Sum of price x quantity over all lines."""
    return sum((line.line_total for line in lines), Decimal("0"))


def has_gift(lines: Iterable[CartLine], gift_id: int) -> bool:
    return any(line.id == gift_id for line in lines)


def evaluate(lines: Iterable[CartLine], policy: GiftPolicy) -> GiftDecision:
    """
    Decide what to do with the gift line for the given cart contents.

    Pure function of the lines; the gift's own price is zero so applying
    the decision never changes the subtotal that produced it.
    """
    lines = tuple(lines)
    total = subtotal(lines)
    gift_present = has_gift(lines, policy.gift.id)

    if total >= policy.threshold and not gift_present:
        return GiftDecision.GRANT
    if total < policy.threshold and gift_present:
        return GiftDecision.REVOKE
    return GiftDecision.KEEP


def progress_percent(amount: Decimal, threshold: Decimal) -> Decimal:
    """Capped percentage of the threshold reached (100 for a zero threshold)."""
    threshold = to_decimal(threshold)
    if threshold <= 0:
        return HUNDRED
    return min(percent_of(amount, threshold), HUNDRED)


def remaining_amount(amount: Decimal, threshold: Decimal) -> Decimal:
    """How much more must be spent to reach the threshold."""
    return max(subtract(threshold, amount), Decimal("0"))
