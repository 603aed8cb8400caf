"""Domain models package."""

from .finance import (
    CategoryTotal,
    Period,
    RecordFilters,
    ResponsibleTotal,
    SummaryTotals,
)
from .forms import RecordForm
from .records import FinanceRecord, RecordChanges, RecordDraft, RecordKind

__all__ = [
    "FinanceRecord",
    "RecordDraft",
    "RecordChanges",
    "RecordKind",
    "RecordForm",
    "Period",
    "SummaryTotals",
    "CategoryTotal",
    "ResponsibleTotal",
    "RecordFilters",
]
