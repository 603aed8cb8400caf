"""Domain normalization helpers."""

from datetime import datetime
from decimal import Decimal, InvalidOperation


def normalize_label(value: str | None) -> str:
    """Strip surrounding whitespace from a free-text label.

    Args:
        value: Raw label typed by the user or read from the store.

    Returns:
        str: Cleaned label, empty when missing.
    """
    if not value:
        return ""
    return value.strip()


def normalize_query(query: str | None) -> str:
    """Lowercase a search query; surrounding spaces are part of the term."""
    return (query or "").lower()


def to_local_naive(value: datetime) -> datetime:
    """Convert aware datetimes to naive local time."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_amount(raw: str | None) -> Decimal | None:
    """Parse an amount typed with ``.`` or ``,`` as decimal separator.

    ``1.234,56`` (pt-BR thousands separators) and ``1234.56`` are both
    accepted.

    Args:
        raw: Text typed by the user.

    Returns:
        Decimal | None: Parsed value, or None when it is not a number.
    """
    cleaned = normalize_label(raw).replace(" ", "")
    if not cleaned:
        return None
    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".")
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


__all__ = [
    "normalize_label",
    "normalize_query",
    "parse_amount",
    "to_local_naive",
]
