"""Aggregations feeding the dashboard."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    CategoryTotal,
    FinanceRecord,
    RecordKind,
    ResponsibleTotal,
    SummaryTotals,
)


def compute_summary_totals(records: Iterable[FinanceRecord]) -> SummaryTotals:
    """Sum income and expense amounts.

    Args:
        records: Records to aggregate.

    Returns:
        SummaryTotals: Income and expense totals; zero for empty input.
    """
    income = Decimal("0")
    expense = Decimal("0")
    for record in records:
        if record.kind is RecordKind.INCOME:
            income += record.amount
        elif record.kind is RecordKind.EXPENSE:
            expense += record.amount
    return SummaryTotals(income=income, expense=expense)


def group_by_category(records: Iterable[FinanceRecord]) -> list[CategoryTotal]:
    """Sum amounts per (category, kind), largest first.

    The same category label under both kinds yields two groups. Groups with
    equal amounts keep the order in which they were first seen.

    Args:
        records: Records to aggregate.

    Returns:
        list[CategoryTotal]: Groups sorted by amount descending.
    """
    totals: dict[tuple[str, RecordKind], Decimal] = {}
    for record in records:
        key = (record.category, record.kind)
        totals[key] = totals.get(key, Decimal("0")) + record.amount

    groups = [
        CategoryTotal(category=category, kind=kind, amount=amount)
        for (category, kind), amount in totals.items()
    ]
    return sorted(groups, key=lambda group: group.amount, reverse=True)


def group_by_responsible(
    records: Iterable[FinanceRecord],
) -> list[ResponsibleTotal]:
    """Sum income and expense separately per responsible party.

    Args:
        records: Records to aggregate.

    Returns:
        list[ResponsibleTotal]: One entry per responsible party, in the
        order they first appear.
    """
    income: dict[str, Decimal] = {}
    expense: dict[str, Decimal] = {}
    order: list[str] = []
    for record in records:
        name = record.responsible
        if name not in income:
            order.append(name)
            income[name] = Decimal("0")
            expense[name] = Decimal("0")
        if record.kind is RecordKind.INCOME:
            income[name] += record.amount
        else:
            expense[name] += record.amount

    return [
        ResponsibleTotal(
            responsible=name,
            income=income[name],
            expense=expense[name],
        )
        for name in order
    ]


__all__ = [
    "compute_summary_totals",
    "group_by_category",
    "group_by_responsible",
]
