"""Domain services package."""

from .aggregation import (
    compute_summary_totals,
    group_by_category,
    group_by_responsible,
)
from .normalization import (
    normalize_label,
    normalize_query,
    parse_amount,
    to_local_naive,
)
from .periods import (
    PERIOD_LABELS,
    filter_by_period,
    previous_month,
    resolve_period,
)
from .record_filters import (
    distinct_categories,
    distinct_responsibles,
    filter_records,
)
from .validation import (
    build_record_draft,
    validate_changes,
    validate_draft,
    validate_record_form,
)

__all__ = [
    "PERIOD_LABELS",
    "build_record_draft",
    "compute_summary_totals",
    "distinct_categories",
    "distinct_responsibles",
    "filter_by_period",
    "filter_records",
    "group_by_category",
    "group_by_responsible",
    "normalize_label",
    "normalize_query",
    "parse_amount",
    "previous_month",
    "resolve_period",
    "to_local_naive",
    "validate_changes",
    "validate_draft",
    "validate_record_form",
]
