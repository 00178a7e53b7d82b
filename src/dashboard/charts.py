"""Plotly figures for a finished projection.

Pure functions: records in, go.Figure out.
"""

import plotly.graph_objects as go

from src.engine.summary import interval_records
from src.models.results import PeriodRecord

GREEN = "#2E5638"
OLIVE = "#6b7e59"
GREY = "#82877d"
RED = "#e7543c"


def cash_flow_figure(records: list[PeriodRecord]) -> go.Figure:
    """Annual cash flow bars with cash-on-cash (%) on a secondary axis."""
    years = [r.year for r in records]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=years,
        y=[float(r.cash_flow) for r in records],
        name="Cash Flow ($)",
        marker_color=OLIVE,
    ))
    fig.add_trace(go.Scatter(
        x=years,
        y=[float(r.cash_on_cash) * 100 for r in records],
        name="CoC Return (%)",
        mode="lines",
        yaxis="y2",
        line=dict(color=RED, dash="dash"),
    ))
    fig.update_layout(
        title="Annual Cash Flow",
        xaxis_title="Year",
        yaxis=dict(title="$", tickprefix="$"),
        yaxis2=dict(title="%", overlaying="y", side="right", ticksuffix="%", showgrid=False),
    )
    return fig


def breakdown_figure(records: list[PeriodRecord], every: int = 5) -> go.Figure:
    """Where EGI goes, sampled at year 1 and every `every` years.

    Negative cash flow is drawn as zero in the stack.
    """
    sampled = interval_records(records, every)
    labels = [f"Yr {r.year}" for r in sampled]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels,
        y=[float(r.effective_gross_income) for r in sampled],
        name="EGI",
        mode="lines",
        line=dict(color=GREEN, width=2, shape="spline"),
    ))
    stacks = [
        ("OpEx", "operating_expenses", GREY),
        ("Interest+PMI", "interest_pmi", OLIVE),
        ("Principal", "principal", GREEN),
    ]
    for name, attr, color in stacks:
        fig.add_trace(go.Bar(
            x=labels,
            y=[float(getattr(r, attr)) for r in sampled],
            name=name,
            marker_color=color,
        ))
    fig.add_trace(go.Bar(
        x=labels,
        y=[max(float(r.cash_flow), 0.0) for r in sampled],
        name="Cash Flow",
        marker_color=RED,
    ))
    fig.update_layout(title="Income & Expense Breakdown", barmode="stack", yaxis_title="$")
    return fig


def equity_figure(records: list[PeriodRecord]) -> go.Figure:
    years = [r.year for r in records]
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=years,
        y=[float(r.home_value) for r in records],
        mode="lines",
        name="Home Value",
        line=dict(color=GREEN),
    ))
    fig.add_trace(go.Scatter(
        x=years,
        y=[float(r.loan_balance) for r in records],
        mode="lines",
        name="Loan Balance",
        line=dict(color=RED, dash="dash"),
    ))
    fig.add_trace(go.Scatter(
        x=years,
        y=[float(r.equity) for r in records],
        mode="lines",
        name="Equity",
        line=dict(color=OLIVE),
        fill="tozeroy",
        fillcolor="rgba(107, 126, 89, 0.1)",
    ))
    fig.update_layout(title="Equity Growth", xaxis_title="Year", yaxis_title="$")
    return fig
