"""Display formatting for the Streamlit UI."""

from datetime import datetime
from decimal import Decimal

from src.domain.models import RecordKind

CURRENCY_SYMBOL = "R$"
DISPLAY_DATETIME_FORMAT = "%d/%m/%Y %H:%M"

KIND_LABELS = {
    RecordKind.EXPENSE: "Expense",
    RecordKind.INCOME: "Income",
}


def format_currency(value: Decimal) -> str:
    """Format an amount as Brazilian reais, e.g. ``R$ 1.234,56``."""
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,.2f}"
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_SYMBOL} {localized}"


def format_datetime(value: datetime) -> str:
    return value.strftime(DISPLAY_DATETIME_FORMAT)


def kind_label(kind: RecordKind | str) -> str:
    """Return the display label of a record kind."""
    try:
        return KIND_LABELS[RecordKind(kind)]
    except ValueError:
        return str(kind)


__all__ = [
    "format_currency",
    "format_datetime",
    "kind_label",
    "KIND_LABELS",
]
