"""Chart builders and table rows for the Streamlit pages.

Data preparation is kept in plain functions returning lists of dicts so it
can be tested without a running Streamlit session.
"""

from collections.abc import Sequence
from decimal import Decimal
from typing import TYPE_CHECKING

import altair as alt

from src.domain.models import ActivityItem, AnnualSummary, ServiceReport

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
INCOME_COLOR = "#2e7d32"
EXPENSE_COLOR = "#e76f51"
UTILITY_COLOR = "#1b9aaa"


def format_currency(value: Decimal, currency_code: str = "USD") -> str:
    """Format an amount for display."""
    if currency_code == "USD":
        sign = "-" if value < 0 else ""
        return f"{sign}${abs(value):,.2f}"
    return f"{value:,.2f} {currency_code}"


def month_label(month: int) -> str:
    """Return the short label of a 1-based month."""
    return MONTH_LABELS[month - 1]


def prepare_monthly_chart_data(
    summary: AnnualSummary,
) -> list[dict[str, str | int | float]]:
    """Return long-format income and expense rows for each month.

    Args:
        summary: Annual summary with its 12-month breakdown.

    Returns:
        Altair-ready rows with ``month``, ``month_index``, ``series`` and
        ``amount`` keys.
    """
    data: list[dict[str, str | int | float]] = []
    for item in summary.months:
        for series, amount in (
            ("Income", item.income),
            ("Expense", item.expense),
        ):
            data.append(
                {
                    "month": month_label(item.month),
                    "month_index": item.month,
                    "series": series,
                    "amount": float(amount),
                }
            )
    return data


def build_monthly_bar_chart(
    data: Sequence[dict[str, str | int | float]],
    height: int = 320,
) -> alt.Chart:
    """Build grouped income/expense bars per month."""
    return (
        alt.Chart(alt.Data(values=list(data)))
        .mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X(
                "month:N",
                sort=list(MONTH_LABELS),
                title=None,
            ),
            xOffset=alt.XOffset("series:N"),
            y=alt.Y("amount:Q", title="Amount"),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(
                    domain=["Income", "Expense"],
                    range=[INCOME_COLOR, EXPENSE_COLOR],
                ),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            tooltip=[
                alt.Tooltip("month:N"),
                alt.Tooltip("series:N"),
                alt.Tooltip("amount:Q", format=",.2f"),
            ],
        )
        .properties(height=height)
    )


def prepare_service_chart_data(
    reports: Sequence[ServiceReport],
) -> list[dict[str, str | int | float]]:
    """Return one row per service with its yearly units and income."""
    return [
        {
            "service": report.service_name,
            "units": report.total_units,
            "income": float(report.total_income),
        }
        for report in reports
    ]


def build_service_income_chart(
    data: Sequence[dict[str, str | int | float]],
    height: int = 300,
) -> alt.Chart:
    """Build horizontal bars of income per service, best seller on top."""
    return (
        alt.Chart(alt.Data(values=list(data)))
        .mark_bar(color=INCOME_COLOR, cornerRadiusEnd=4)
        .encode(
            y=alt.Y("service:N", sort="-x", title=None),
            x=alt.X("income:Q", title="Income"),
            tooltip=[
                alt.Tooltip("service:N"),
                alt.Tooltip("units:Q"),
                alt.Tooltip("income:Q", format=",.2f"),
            ],
        )
        .properties(height=height)
    )


def build_annual_figure(summary: AnnualSummary) -> "go.Figure":
    """Build a Plotly figure with monthly bars and the utility line.

    Args:
        summary: Annual summary to plot.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    labels = [month_label(item.month) for item in summary.months]
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            name="Income",
            x=labels,
            y=[float(item.income) for item in summary.months],
            marker_color=INCOME_COLOR,
        )
    )
    fig.add_trace(
        go.Bar(
            name="Expense",
            x=labels,
            y=[float(item.expense) for item in summary.months],
            marker_color=EXPENSE_COLOR,
        )
    )
    fig.add_trace(
        go.Scatter(
            name="Utility",
            x=labels,
            y=[float(item.utility) for item in summary.months],
            mode="lines+markers",
            line=dict(color=UTILITY_COLOR, width=2),
        )
    )
    fig.update_layout(
        barmode="group",
        margin=dict(l=8, r=8, t=8, b=8),
        height=420,
        legend=dict(orientation="h", y=-0.15),
    )
    return fig


def activity_rows(
    items: Sequence[ActivityItem],
    currency_code: str = "USD",
) -> list[dict[str, str]]:
    """Return table rows for the dashboard activity feed."""
    rows = []
    for item in items:
        sign = "+" if item.is_positive else "-"
        amount = format_currency(item.amount, currency_code)
        rows.append(
            {
                "Time": item.timestamp.strftime("%H:%M"),
                "Type": item.kind.capitalize(),
                "Description": item.description,
                "Amount": f"{sign}{amount}",
            }
        )
    return rows


__all__ = [
    "format_currency",
    "month_label",
    "prepare_monthly_chart_data",
    "build_monthly_bar_chart",
    "prepare_service_chart_data",
    "build_service_income_chart",
    "build_annual_figure",
    "activity_rows",
]
