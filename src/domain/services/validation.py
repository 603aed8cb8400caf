"""Validation of record entry data."""

from datetime import datetime
from decimal import Decimal

from src.domain.errors import RecordValidationError
from src.domain.models import RecordChanges, RecordDraft, RecordForm, RecordKind
from src.domain.services.normalization import (
    normalize_label,
    parse_amount,
    to_local_naive,
)
from src.utils.decimal_utils import to_amount


def _parse_occurred_at(raw: str) -> datetime | None:
    cleaned = normalize_label(raw)
    if not cleaned:
        return None
    try:
        parsed = datetime.fromisoformat(cleaned)
    except ValueError:
        return None
    return to_local_naive(parsed)


def _amount_error(amount: Decimal | None) -> str | None:
    """Return the message for an amount that cannot be stored, if any."""
    if amount is None or amount <= 0:
        return "Amount must be a positive number"
    if amount != to_amount(amount):
        return "Amount must have at most two decimal places"
    return None


def _parse_kind(raw: str) -> RecordKind | None:
    try:
        return RecordKind(normalize_label(raw))
    except ValueError:
        return None


def validate_record_form(form: RecordForm) -> dict[str, str]:
    """Check a raw form and collect one message per invalid field.

    Args:
        form: Values typed by the user.

    Returns:
        dict[str, str]: Field name to error message; empty when valid.
    """
    errors: dict[str, str] = {}

    if not normalize_label(form.occurred_at):
        errors["occurred_at"] = "Date and time are required"
    elif _parse_occurred_at(form.occurred_at) is None:
        errors["occurred_at"] = "Date and time must look like YYYY-MM-DDTHH:MM"

    if not normalize_label(form.responsible):
        errors["responsible"] = "Responsible is required"

    if not normalize_label(form.category):
        errors["category"] = "Category is required"

    if _parse_kind(form.kind) is None:
        errors["kind"] = "Kind must be expense or income"

    if not normalize_label(form.amount):
        errors["amount"] = "Amount is required"
    else:
        amount_error = _amount_error(parse_amount(form.amount))
        if amount_error:
            errors["amount"] = amount_error

    return errors


def build_record_draft(form: RecordForm) -> RecordDraft:
    """Turn a valid form into a draft ready for the record store.

    Args:
        form: Values typed by the user.

    Returns:
        RecordDraft: Draft with parsed values and stripped labels.

    Raises:
        RecordValidationError: When any field is invalid.
    """
    errors = validate_record_form(form)
    if errors:
        raise RecordValidationError(errors)
    return RecordDraft(
        occurred_at=_parse_occurred_at(form.occurred_at),
        responsible=normalize_label(form.responsible),
        category=normalize_label(form.category),
        kind=_parse_kind(form.kind),
        amount=parse_amount(form.amount),
        description=normalize_label(form.description),
    )


def _check_amount(amount: Decimal | None, errors: dict[str, str]) -> None:
    if amount is None:
        return
    amount_error = _amount_error(amount)
    if amount_error:
        errors["amount"] = amount_error


def validate_draft(draft: RecordDraft) -> None:
    """Enforce record invariants on a programmatic draft.

    Raises:
        RecordValidationError: When a label is empty or the amount is not
            a positive value in whole cents.
    """
    errors: dict[str, str] = {}
    if not normalize_label(draft.responsible):
        errors["responsible"] = "Responsible is required"
    if not normalize_label(draft.category):
        errors["category"] = "Category is required"
    if draft.amount is None:
        errors["amount"] = "Amount is required"
    else:
        _check_amount(draft.amount, errors)
    if errors:
        raise RecordValidationError(errors)


def validate_changes(changes: RecordChanges) -> None:
    """Enforce record invariants on the fields an update sets.

    Raises:
        RecordValidationError: When a set label is empty or a set amount is
            not a positive value in whole cents.
    """
    errors: dict[str, str] = {}
    if changes.responsible is not None and not normalize_label(
        changes.responsible
    ):
        errors["responsible"] = "Responsible is required"
    if changes.category is not None and not normalize_label(changes.category):
        errors["category"] = "Category is required"
    _check_amount(changes.amount, errors)
    if errors:
        raise RecordValidationError(errors)


__all__ = [
    "validate_record_form",
    "build_record_draft",
    "validate_draft",
    "validate_changes",
]
