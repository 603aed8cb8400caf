"""Decimal helpers for money amounts."""

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def to_amount(value) -> Decimal:
    """Return a stored amount as a Decimal rounded to cents.

    Floats go through ``str`` so ``0.1`` reads back as ``0.10``; ``None``
    counts as zero.
    """
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


__all__ = ["to_amount", "CENTS"]
