"""Search and attribute filters for the records list."""

from collections.abc import Iterable
from datetime import datetime, time

from src.domain.constants import ALL_FILTER
from src.domain.models import FinanceRecord, RecordFilters
from src.domain.services.normalization import normalize_query


def _matches_query(record: FinanceRecord, query: str) -> bool:
    if not query:
        return True
    haystacks = (record.description or "", record.responsible, record.category)
    return any(query in value.lower() for value in haystacks)


def _matches_facet(value: str, selected: str) -> bool:
    return selected == ALL_FILTER or value == selected


def filter_records(
    records: Iterable[FinanceRecord],
    filters: RecordFilters,
) -> list[FinanceRecord]:
    """Return records matching every criterion, most recent first.

    Args:
        records: Records to filter.
        filters: Query, facets and inclusive date bounds.

    Returns:
        list[FinanceRecord]: Matching records sorted by ``occurred_at``
        descending; records with equal timestamps keep their input order.
    """
    query = normalize_query(filters.query)
    lower_bound = (
        datetime.combine(filters.start_date, time.min)
        if filters.start_date
        else None
    )
    upper_bound = (
        datetime.combine(filters.end_date, time(23, 59, 59))
        if filters.end_date
        else None
    )

    matched = []
    for record in records:
        if not _matches_query(record, query):
            continue
        if not _matches_facet(record.kind.value, filters.kind):
            continue
        if not _matches_facet(record.responsible, filters.responsible):
            continue
        if not _matches_facet(record.category, filters.category):
            continue
        if lower_bound and record.occurred_at < lower_bound:
            continue
        if upper_bound and record.occurred_at > upper_bound:
            continue
        matched.append(record)

    return sorted(matched, key=lambda record: record.occurred_at, reverse=True)


def distinct_responsibles(records: Iterable[FinanceRecord]) -> list[str]:
    """Return the sorted unique responsible parties."""
    return sorted({record.responsible for record in records})


def distinct_categories(records: Iterable[FinanceRecord]) -> list[str]:
    """Return the sorted unique categories."""
    return sorted({record.category for record in records})


__all__ = ["filter_records", "distinct_responsibles", "distinct_categories"]
