"""Use case to build the records list view."""

from collections.abc import Sequence
from dataclasses import dataclass

from src.domain.models import FinanceRecord, RecordFilters
from src.domain.services import (
    distinct_categories,
    distinct_responsibles,
    filter_records,
)


@dataclass(frozen=True)
class RecordsListView:
    """Filtered records plus the options offered by the filter widgets."""

    records: list[FinanceRecord]
    total_count: int
    responsibles: list[str]
    categories: list[str]

    @property
    def shown_count(self) -> int:
        return len(self.records)


class ListRecordsUseCase:
    """Apply the list filters to the cached records."""

    def execute(
        self,
        records: Sequence[FinanceRecord],
        filters: RecordFilters | None = None,
    ) -> RecordsListView:
        """Return the records matching ``filters``, most recent first."""
        return RecordsListView(
            records=filter_records(records, filters or RecordFilters()),
            total_count=len(records),
            responsibles=distinct_responsibles(records),
            categories=distinct_categories(records),
        )


__all__ = ["ListRecordsUseCase", "RecordsListView"]
