"""Chart data preparation and Altair charts for the dashboard.

The ``prepare_*`` functions are pure transformations of domain aggregates
into Altair-ready rows; the ``build_*`` functions only wrap them in charts.
"""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt

from src.adapters.interface.streamlit.formatting import (
    KIND_LABELS,
    format_currency,
    kind_label,
)
from src.domain.models import CategoryTotal, RecordKind, ResponsibleTotal

PALETTE = (
    "#10b981",
    "#3b82f6",
    "#f59e0b",
    "#ef4444",
    "#8b5cf6",
    "#06b6d4",
)
INCOME_COLOR = "#10b981"
EXPENSE_COLOR = "#ef4444"
OTHER_LABEL = "Other"


def prepare_category_chart_data(
    categories: Sequence[CategoryTotal],
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        categories: Category groups, usually expense groups only.
        max_categories: Maximum slices before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        categories,
        key=lambda item: item.amount,
        reverse=True,
    )
    total_amount = sum(
        (item.amount for item in sorted_items),
        start=Decimal("0"),
    )
    slices = [(item.category, item.amount) for item in sorted_items[
        :max_categories
    ]]
    other_amount = sum(
        (item.amount for item in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount:
        slices.append((OTHER_LABEL, other_amount))

    data: list[dict[str, str | float]] = []
    for category, amount in slices:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def prepare_responsible_chart_data(
    responsibles: Sequence[ResponsibleTotal],
) -> list[dict[str, str | float]]:
    """Prepare long-form rows for the income vs expense bar chart."""
    data: list[dict[str, str | float]] = []
    for item in responsibles:
        for kind, amount in (
            (RecordKind.INCOME, item.income),
            (RecordKind.EXPENSE, item.expense),
        ):
            data.append(
                {
                    "responsible": item.responsible,
                    "kind": kind_label(kind),
                    "amount": float(amount),
                    "amount_label": format_currency(amount),
                }
            )
    return data


def build_category_donut(
    data: list[dict[str, str | float]],
    chart_size: int = 300,
) -> alt.LayerChart:
    """Return a donut chart of amounts by category."""
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=list(PALETTE)),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("amount_label:N", title="Amount"),
            alt.Tooltip("share_label:N", title="Share"),
        ],
    )
    return alt.layer(base).properties(width=chart_size, height=chart_size)


def build_responsible_bars(
    data: list[dict[str, str | float]],
    height: int = 300,
) -> alt.Chart:
    """Return grouped bars of income and expense per responsible party."""
    return alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("responsible:N", title=None, sort=None),
        xOffset=alt.XOffset("kind:N"),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=[
                    KIND_LABELS[RecordKind.INCOME],
                    KIND_LABELS[RecordKind.EXPENSE],
                ],
                range=[INCOME_COLOR, EXPENSE_COLOR],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("responsible:N", title="Responsible"),
            alt.Tooltip("kind:N", title="Kind"),
            alt.Tooltip("amount_label:N", title="Amount"),
        ],
    ).properties(height=height)


__all__ = [
    "prepare_category_chart_data",
    "prepare_responsible_chart_data",
    "build_category_donut",
    "build_responsible_bars",
    "OTHER_LABEL",
]
