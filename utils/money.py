"""
utils/money.py
--------------
Dollars → cents conversion for nightly prices.
Prices are stored as integer cents; callers always speak dollars.
Both the insert path and the search path go through `to_cents`.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, NewType, Optional

Cents = NewType("Cents", int)

_CENTS_PER_DOLLAR = Decimal(100)


def to_cents(dollars: Any) -> Optional[Cents]:
    """
    Convert a dollar amount to integer cents.

    Args:
        dollars: int, float, Decimal or numeric string.

    Returns:
        The amount in cents, rounded half-up. ``None`` stays ``None``;
        a value that is not a number is returned unchanged so that the
        database rejects it when the statement runs.
    """
    if dollars is None:
        return None
    if isinstance(dollars, bool):
        return dollars  # type: ignore[return-value]
    try:
        amount = Decimal(str(dollars))
    except (InvalidOperation, ValueError):
        return dollars  # type: ignore[return-value]
    if not amount.is_finite():
        return dollars  # type: ignore[return-value]
    return Cents(int((amount * _CENTS_PER_DOLLAR).quantize(Decimal(1), rounding=ROUND_HALF_UP)))
