"""Hypothetical sale at the end of a projection year.

Pure functions. No I/O.
"""

from decimal import Decimal

from src.engine.irr import compute_irr


def sale_proceeds(home_value: Decimal, selling_costs_pct: Decimal, loan_balance: Decimal) -> Decimal:
    """Net sale price minus the remaining loan payoff."""
    return home_value * (1 - selling_costs_pct) - loan_balance


def profit_if_sold(proceeds: Decimal, total_cash_invested: Decimal) -> Decimal:
    return proceeds - total_cash_invested


def irr_if_sold(
    cash_flow_history: list[Decimal],
    year_cash_flow: Decimal,
    proceeds: Decimal,
) -> Decimal:
    """IRR of the realized history plus a sale at the end of this year.

    cash_flow_history holds the initial outlay and every prior year's cash
    flow. It is not modified: the terminal year is appended to a copy.
    """
    return compute_irr([*cash_flow_history, year_cash_flow + proceeds])
