"""
Money helpers. Amounts are Decimal with two places.
"""
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def to_money(value):
    """
    Convert a number or numeric string to a two-place Decimal.

    Raises:
        ValueError: If value is not numeric.
    """
    if value is None:
        value = 0
    try:
        return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc
