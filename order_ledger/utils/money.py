"""Monetary amount helpers.

The ledger stores every amount as integer cents, so balance arithmetic is
exact. Amounts arrive from callers as numbers in currency units and must
already be expressible in whole cents; nothing is rounded.
"""
import math
from decimal import Decimal, InvalidOperation
from typing import Any

from order_ledger.core.errors import InvalidAmount

CENT = Decimal("0.01")


def to_cents(value: Any, field: str = "amount") -> int:
    """
    Validate an amount and convert it to integer cents.

    Rules:
    - must be a real number (bools rejected)
    - must be finite
    - at most 2 decimal places
    - must be positive
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidAmount(f"{field} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidAmount(f"{field} must be finite, got {value}")
    if value <= 0:
        raise InvalidAmount(f"{field} must be positive, got {value}")

    # str() gives the shortest repr, so 0.1 becomes Decimal("0.1") and not its binary expansion
    amount = Decimal(str(value))
    try:
        exact = amount == amount.quantize(CENT)
    except InvalidOperation:
        raise InvalidAmount(f"{field} is too large, got {value}")
    if not exact:
        raise InvalidAmount(f"{field} must have at most 2 decimal places, got {value}")
    return int(amount * 100)


def from_cents(cents: int) -> float:
    """Integer cents back to currency units for display and serialization."""
    return cents / 100
