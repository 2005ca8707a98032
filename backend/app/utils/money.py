from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

_CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal | None:
    """Coerce a stored amount to ``Decimal``; ``None`` when it is not a number.

    Floats go through ``str`` so 49.99 stays 49.99 rather than its binary
    expansion. Booleans are rejected even though they are ints.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None


def round2(value: Decimal) -> Decimal:
    """Round to cents, halves away from zero (ROUND_HALF_UP on Decimal)."""
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def is_valid_price(value: Decimal | None) -> bool:
    return value is not None and value.is_finite() and value >= 0


def is_valid_rate(value: Decimal | None) -> bool:
    """Tax and discount rates are fractions in ``[0, 1)``."""
    return value is not None and value.is_finite() and 0 <= value < 1
