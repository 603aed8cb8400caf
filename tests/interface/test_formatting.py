"""Tests for the Streamlit display formatting helpers."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.adapters.interface.streamlit.formatting import (
    format_currency,
    format_datetime,
    kind_label,
)
from src.domain.models import RecordKind


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("3349.50"), "R$ 3.349,50"),
        (Decimal("0"), "R$ 0,00"),
        (Decimal("1234567.891"), "R$ 1.234.567,89"),
        (Decimal("-80"), "-R$ 80,00"),
    ],
)
def test_format_currency(value: Decimal, expected: str) -> None:
    assert format_currency(value) == expected


def test_format_datetime() -> None:
    assert format_datetime(datetime(2024, 6, 8, 20, 15)) == "08/06/2024 20:15"


def test_kind_label() -> None:
    assert kind_label(RecordKind.INCOME) == "Income"
    assert kind_label("expense") == "Expense"
    assert kind_label("transfer") == "transfer"
