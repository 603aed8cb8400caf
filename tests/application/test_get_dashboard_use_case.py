"""Tests for the GetDashboardUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.domain.models import Period, RecordKind


def test_execute_computes_totals_for_all_records(make_record) -> None:
    """Two records give income, expense and balance totals."""
    records = [
        make_record(
            id=1,
            kind=RecordKind.EXPENSE,
            category="Alimentação",
            responsible="João",
            amount="150.50",
        ),
        make_record(
            id=2,
            kind=RecordKind.INCOME,
            category="Salário",
            responsible="Maria",
            amount="3500.00",
        ),
    ]
    logger = MagicMock()

    view = GetDashboardUseCase(logger=logger).execute(records, Period.ALL)

    assert view.period is Period.ALL
    assert view.summary.income == Decimal("3500.00")
    assert view.summary.expense == Decimal("150.50")
    assert view.summary.balance == Decimal("3349.50")
    assert [group.category for group in view.categories] == [
        "Salário",
        "Alimentação",
    ]
    assert [group.category for group in view.expense_categories] == [
        "Alimentação",
    ]
    assert [item.responsible for item in view.responsibles] == [
        "João",
        "Maria",
    ]
    logger.info.assert_called_once()
    logger.warning.assert_not_called()


def test_execute_scopes_records_to_period(sample_records) -> None:
    """Only records in the previous month are aggregated."""
    view = GetDashboardUseCase(logger=MagicMock()).execute(
        sample_records,
        Period.LAST_MONTH,
        today=date(2024, 7, 3),
    )

    assert len(view.records) == 5
    assert view.summary.balance == Decimal("4269.50")

    empty = GetDashboardUseCase(logger=MagicMock()).execute(
        sample_records,
        Period.CURRENT_MONTH,
        today=date(2024, 7, 3),
    )

    assert empty.records == ()
    assert empty.summary.balance == 0
    assert empty.categories == []
    assert empty.responsibles == []


def test_execute_warns_and_shows_all_for_unknown_period(
    make_record,
) -> None:
    logger = MagicMock()
    records = [make_record(occurred_at=datetime(2001, 1, 1))]

    view = GetDashboardUseCase(logger=logger).execute(records, "decade")

    assert view.period is Period.ALL
    assert len(view.records) == 1
    logger.warning.assert_called_once()


def test_execute_accepts_period_values_as_strings(sample_records) -> None:
    logger = MagicMock()

    view = GetDashboardUseCase(logger=logger).execute(
        sample_records,
        "current-year",
        today=date(2024, 12, 31),
    )

    assert view.period is Period.CURRENT_YEAR
    assert len(view.records) == 5
    logger.warning.assert_not_called()


def test_execute_without_period_shows_all_silently(sample_records) -> None:
    """No selection is not an unknown period."""
    logger = MagicMock()

    view = GetDashboardUseCase(logger=logger).execute(sample_records, None)

    assert view.period is Period.ALL
    assert len(view.records) == 5
    logger.warning.assert_not_called()
