"""Use case to compute the dashboard figures for a period."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from src.domain.models import (
    CategoryTotal,
    FinanceRecord,
    Period,
    RecordKind,
    ResponsibleTotal,
    SummaryTotals,
)
from src.domain.services import (
    compute_summary_totals,
    filter_by_period,
    group_by_category,
    group_by_responsible,
    resolve_period,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardView:
    """Figures rendered by the dashboard page.

    Attributes:
        period: Period actually applied.
        records: Records that fall in the period.
        summary: Income, expense and balance totals.
        categories: Totals per (category, kind), largest first.
        responsibles: Income/expense totals per responsible party.
    """

    period: Period
    records: tuple[FinanceRecord, ...]
    summary: SummaryTotals
    categories: list[CategoryTotal]
    responsibles: list[ResponsibleTotal]

    @property
    def expense_categories(self) -> list[CategoryTotal]:
        """Return the category groups of kind expense."""
        return [
            group for group in self.categories
            if group.kind is RecordKind.EXPENSE
        ]


class GetDashboardUseCase:
    """Filter records by period and aggregate them for display."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        records: Iterable[FinanceRecord],
        period: Period | str | None = Period.CURRENT_MONTH,
        today: date | None = None,
    ) -> DashboardView:
        """Return dashboard figures for the selected period.

        Args:
            records: Cached records from the store.
            period: Period selector; None and unknown values select every
                record, and only unknown values log a warning.
            today: Optional reference date for the period.

        Returns:
            DashboardView: Totals and groupings over the period.
        """
        selected = resolve_period(period)
        if period is not None and selected.value != getattr(
            period, "value", period
        ):
            self._logger.warning(
                f"Unknown period '{period}', showing all records"
            )
        in_period = tuple(filter_by_period(records, selected, today=today))
        summary = compute_summary_totals(in_period)
        view = DashboardView(
            period=selected,
            records=in_period,
            summary=summary,
            categories=group_by_category(in_period),
            responsibles=group_by_responsible(in_period),
        )
        self._logger.info(
            f"Dashboard computed for {selected.value}: "
            f"records={len(in_period)}, income={summary.income}, "
            f"expense={summary.expense}, balance={summary.balance}"
        )
        return view


__all__ = ["GetDashboardUseCase", "DashboardView"]
