"""Domain package for business rules and core models."""

from .constants import (
    ALL_FILTER,
    SUGGESTED_EXPENSE_CATEGORIES,
    SUGGESTED_INCOME_CATEGORIES,
    SUGGESTED_RESPONSIBLES,
    suggested_categories,
)
from .errors import RecordValidationError
from .models import (
    CategoryTotal,
    FinanceRecord,
    Period,
    RecordChanges,
    RecordDraft,
    RecordFilters,
    RecordForm,
    RecordKind,
    ResponsibleTotal,
    SummaryTotals,
)
from .services import (
    build_record_draft,
    compute_summary_totals,
    filter_by_period,
    filter_records,
    group_by_category,
    group_by_responsible,
)

__all__ = [
    "ALL_FILTER",
    "SUGGESTED_EXPENSE_CATEGORIES",
    "SUGGESTED_INCOME_CATEGORIES",
    "SUGGESTED_RESPONSIBLES",
    "suggested_categories",
    "RecordValidationError",
    "CategoryTotal",
    "FinanceRecord",
    "Period",
    "RecordChanges",
    "RecordDraft",
    "RecordFilters",
    "RecordForm",
    "RecordKind",
    "ResponsibleTotal",
    "SummaryTotals",
    "build_record_draft",
    "compute_summary_totals",
    "filter_by_period",
    "filter_records",
    "group_by_category",
    "group_by_responsible",
]
