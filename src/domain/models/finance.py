"""Domain models for dashboard aggregates and list filters."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.constants import ALL_FILTER
from src.domain.models.records import RecordKind


class Period(str, Enum):
    """Named date range used to scope the dashboard."""

    CURRENT_MONTH = "current-month"
    LAST_MONTH = "last-month"
    CURRENT_YEAR = "current-year"
    ALL = "all"


@dataclass(frozen=True)
class SummaryTotals:
    """Summary of income and expense totals.

    Attributes:
        income: Sum of income amounts.
        expense: Sum of expense amounts.
    """

    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class CategoryTotal:
    """Amount aggregated for a (category, kind) pair."""

    category: str
    kind: RecordKind
    amount: Decimal


@dataclass(frozen=True)
class ResponsibleTotal:
    """Income and expense totals for one responsible party."""

    responsible: str
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class RecordFilters:
    """Criteria of the records list view.

    ``kind``, ``responsible`` and ``category`` use ``ALL_FILTER`` to mean
    no constraint; the dates are inclusive bounds.
    """

    query: str = ""
    kind: str = ALL_FILTER
    responsible: str = ALL_FILTER
    category: str = ALL_FILTER
    start_date: date | None = None
    end_date: date | None = None


__all__ = [
    "Period",
    "SummaryTotals",
    "CategoryTotal",
    "ResponsibleTotal",
    "RecordFilters",
]
