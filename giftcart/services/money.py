"""
Money Utilities - Safe Decimal operations for cart amounts.

Avoids float precision issues by using Decimal throughout.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Amount = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Precision for whole-unit amounts
INTEGER_PRECISION = Decimal("1")

HUNDRED = Decimal("100")


def to_decimal(value: Union[Amount, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Convert via string to avoid float precision issues
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Amount, to_int: bool = False) -> Decimal:
    """
    Round monetary value to appropriate precision.

    Args:
        value: Value to round
        to_int: If True, round to whole units

    Returns:
        Rounded Decimal value
    """
    decimal_value = to_decimal(value)
    precision = INTEGER_PRECISION if to_int else MONEY_PRECISION
    return decimal_value.quantize(precision, rounding=ROUND_HALF_UP)


def is_whole(value: Amount) -> bool:
    """True if the amount has no fractional part."""
    decimal_value = to_decimal(value)
    return decimal_value == decimal_value.to_integral_value()


def format_money(value: Amount, symbol: str = "₹") -> str:
    """
    Format monetary value with a currency symbol.

    Whole amounts are shown without decimals ("₹1,000"), fractional
    amounts with two places ("₹12.50").
    """
    decimal_value = to_decimal(value)

    if is_whole(decimal_value):
        formatted = f"{int(round_money(decimal_value, to_int=True)):,}"
    else:
        formatted = f"{round_money(decimal_value):,.2f}"

    return f"{symbol}{formatted}"


def to_float(value: Amount) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def multiply(value: Amount, factor: Amount) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def subtract(a: Amount, b: Amount) -> Decimal:
    """Safe subtraction of monetary values."""
    return to_decimal(a) - to_decimal(b)


def divide(value: Amount, divisor: Amount) -> Decimal:
    """Safe division of monetary value."""
    d = to_decimal(divisor)
    if d == 0:
        return Decimal("0")
    return to_decimal(value) / d


def percent_of(value: Amount, total: Amount) -> Decimal:
    """What percentage ``value`` is of ``total`` (0 when total is 0)."""
    return multiply(divide(value, total), HUNDRED)
