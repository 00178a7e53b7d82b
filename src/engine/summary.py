"""Headline KPIs and milestone-year summary drawn from a finished projection.

Pure functions. No I/O.
"""

from decimal import Decimal

from src.models.results import PeriodRecord, ProjectionResult

DEFAULT_MILESTONE_YEARS = (1, 5, 10, 30)

# (label, record attribute, divisor applied before display)
MILESTONE_METRICS: list[tuple[str, str, int]] = [
    ("IRR (if Sold)", "irr", 1),
    ("Monthly Cash Flow", "cash_flow", 12),
    ("Annual Cash Flow", "cash_flow", 1),
    ("Cash-on-Cash", "cash_on_cash", 1),
    ("Cap Rate", "cap_rate", 1),
    ("DSCR", "dscr", 1),
    ("Principal Paydown", "principal", 1),
    ("ROI", "roi", 1),
    ("Profit if Sold", "profit_if_sold", 1),
]


def headline_kpis(result: ProjectionResult) -> dict:
    """Year-1 figures shown at the top of the report."""
    if result.yearly_projections:
        first = result.yearly_projections[0]
        monthly_cf = first.cash_flow / 12
        coc = first.cash_on_cash
        cap = first.cap_rate
    else:
        monthly_cf = coc = cap = Decimal("0")

    return {
        "monthly_cash_flow": monthly_cf,
        "cash_on_cash": coc,
        "cap_rate": cap,
        "one_percent_ratio": result.one_percent_ratio,
        "one_percent_rule": "Pass" if result.passes_one_percent_rule else "Fail",
    }


def milestone_table(
    records: list[PeriodRecord],
    years: tuple[int, ...] | list[int] = DEFAULT_MILESTONE_YEARS,
) -> list[dict]:
    """One row per metric, one value per requested year.

    Years outside the schedule get None.
    """
    by_year = {r.year: r for r in records}
    rows = []
    for label, attr, divisor in MILESTONE_METRICS:
        values: list[Decimal | None] = []
        for y in years:
            record = by_year.get(y)
            values.append(getattr(record, attr) / divisor if record is not None else None)
        rows.append({"label": label, "metric": attr, "values": values})
    return rows


def interval_records(records: list[PeriodRecord], every: int = 5) -> list[PeriodRecord]:
    """Year 1 plus every `every`-th year."""
    if every <= 0:
        return list(records)
    return [r for i, r in enumerate(records) if i == 0 or (i + 1) % every == 0]
