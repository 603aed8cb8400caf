"""Tests for the record value types."""

from datetime import datetime
from decimal import Decimal

from src.domain.constants import (
    SUGGESTED_EXPENSE_CATEGORIES,
    SUGGESTED_INCOME_CATEGORIES,
    suggested_categories,
)
from src.domain.models import RecordChanges, RecordForm, RecordKind


def test_with_changes_keeps_identity_and_created_at(make_record) -> None:
    record = make_record(id=7, created_at=datetime(2024, 1, 1, 9, 0))

    updated = record.with_changes(
        RecordChanges(amount=Decimal("99.90"), kind=RecordKind.INCOME)
    )

    assert updated.id == 7
    assert updated.created_at == datetime(2024, 1, 1, 9, 0)
    assert updated.amount == Decimal("99.90")
    assert updated.kind is RecordKind.INCOME
    assert updated.category == record.category


def test_changes_as_dict_skips_unset_fields() -> None:
    changes = RecordChanges(description="", responsible="Ana")

    assert changes.as_dict() == {"description": "", "responsible": "Ana"}
    assert RecordChanges().is_empty()


def test_form_from_record_prefills_values(make_record) -> None:
    record = make_record(
        occurred_at=datetime(2024, 6, 10, 14, 5),
        amount="1234.5",
        description="Feira",
    )

    form = RecordForm.from_record(record)

    assert form.occurred_at == "2024-06-10T14:05"
    assert form.amount == "1234,50"
    assert form.kind == "expense"
    assert form.description == "Feira"


def test_blank_form_defaults_to_expense_now() -> None:
    form = RecordForm.blank(datetime(2024, 3, 2, 8, 15))

    assert form.occurred_at == "2024-03-02T08:15"
    assert form.kind == RecordKind.EXPENSE.value
    assert form.amount == ""


def test_suggested_categories_follow_kind() -> None:
    assert suggested_categories(RecordKind.INCOME) == SUGGESTED_INCOME_CATEGORIES
    assert suggested_categories("expense") == SUGGESTED_EXPENSE_CATEGORIES
