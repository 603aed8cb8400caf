"""Period filter for the dashboard."""

from collections.abc import Iterable, Iterator
from datetime import date

from src.domain.models import FinanceRecord, Period

PERIOD_LABELS = {
    Period.CURRENT_MONTH: "Current month",
    Period.LAST_MONTH: "Last month",
    Period.CURRENT_YEAR: "Current year",
    Period.ALL: "All time",
}


def resolve_period(value: Period | str | None) -> Period:
    """Map a selector to a ``Period``, falling back to ``Period.ALL``.

    Args:
        value: Period member or its string value.

    Returns:
        Period: Matching period, ``Period.ALL`` when unrecognized.
    """
    if isinstance(value, Period):
        return value
    try:
        return Period(value)
    except ValueError:
        return Period.ALL


def previous_month(today: date) -> tuple[int, int]:
    """Return (year, month) of the month before ``today``."""
    if today.month == 1:
        return today.year - 1, 12
    return today.year, today.month - 1


def filter_by_period(
    records: Iterable[FinanceRecord],
    period: Period | str | None,
    today: date | None = None,
) -> Iterator[FinanceRecord]:
    """Lazily yield the records whose timestamp falls in ``period``.

    Args:
        records: Records to scan.
        period: Period selector; unknown values mean no filtering.
        today: Reference date, defaults to the current date at call time.

    Returns:
        Iterator[FinanceRecord]: Matching records in input order.
    """
    selected = resolve_period(period)
    reference = today or date.today()

    if selected is Period.CURRENT_MONTH:
        target = (reference.year, reference.month)
        return (
            record for record in records
            if (record.occurred_at.year, record.occurred_at.month) == target
        )
    if selected is Period.LAST_MONTH:
        target = previous_month(reference)
        return (
            record for record in records
            if (record.occurred_at.year, record.occurred_at.month) == target
        )
    if selected is Period.CURRENT_YEAR:
        return (
            record for record in records
            if record.occurred_at.year == reference.year
        )
    return iter(records)


__all__ = [
    "PERIOD_LABELS",
    "filter_by_period",
    "previous_month",
    "resolve_period",
]
