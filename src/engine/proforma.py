"""Projection orchestrator: composes the engine sub-modules into a 40-year schedule.

Pure computation. No I/O. Dataclasses in, ProjectionResult out.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from src.models.assumptions import DealAssumptions
from src.models.results import PeriodRecord, ProjectionResult

from src.engine.debt import monthly_payment, debt_service_year
from src.engine.cashflow import (
    gross_rent,
    effective_gross_income,
    operating_expenses,
    noi,
    cap_rate,
    cash_on_cash,
    dscr,
    appreciation_amount,
    roi,
    one_percent_ratio,
    passes_one_percent_rule,
)
from src.engine.disposition import sale_proceeds, profit_if_sold, irr_if_sold

logger = logging.getLogger(__name__)

PROJECTION_YEARS = 40


@dataclass
class SimulationState:
    """Running balances for one projection. Rolled forward at each year end."""

    home_value: Decimal
    loan_balance: Decimal
    monthly_rent: Decimal
    property_tax: Decimal  # Annual
    insurance: Decimal  # Annual
    hoa: Decimal  # Annual
    utilities: Decimal  # Annual

    @classmethod
    def from_assumptions(cls, assumptions: DealAssumptions) -> "SimulationState":
        return cls(
            home_value=assumptions.after_repair_value,
            loan_balance=assumptions.loan_amount,
            monthly_rent=assumptions.monthly_rent,
            property_tax=assumptions.property_tax,
            insurance=assumptions.annual_insurance,
            hoa=assumptions.hoa * 12,
            utilities=assumptions.utilities * 12,
        )

    def roll_forward(self, assumptions: DealAssumptions) -> None:
        """Apply one year of rent growth, appreciation and cost inflation."""
        inflation = 1 + assumptions.annual_expense_growth
        self.monthly_rent *= 1 + assumptions.annual_rent_growth
        self.home_value *= 1 + assumptions.annual_appreciation
        self.property_tax *= inflation
        self.insurance *= inflation
        self.hoa *= inflation
        self.utilities *= inflation


def run_projection(
    assumptions: DealAssumptions,
    years: int = PROJECTION_YEARS,
) -> ProjectionResult:
    """Run the year-by-year projection.

    Each year depends on the prior year's ending loan balance and inflated
    rent and cost bases. The IRR for a year assumes a sale at that year's
    end on top of every prior year's realized cash flow.
    """
    total_cash_invested = assumptions.total_cash_invested
    loan_amount = assumptions.loan_amount
    payment = monthly_payment(loan_amount, assumptions.interest_rate, assumptions.loan_term_years)
    ratio = one_percent_ratio(assumptions)

    logger.debug(
        "Projecting %d years: cash invested %s, loan %s, monthly P&I %s",
        years, total_cash_invested, loan_amount, payment,
    )

    state = SimulationState.from_assumptions(assumptions)
    cash_flows: list[Decimal] = [-total_cash_invested]
    projections: list[PeriodRecord] = []

    for year in range(1, years + 1):
        # Income
        gr = gross_rent(state.monthly_rent)
        egi = effective_gross_income(gr, assumptions.vacancy_rate)

        # Expenses
        expenses = operating_expenses(
            assumptions,
            gross=gr,
            egi=egi,
            property_tax=state.property_tax,
            insurance=state.insurance,
            hoa=state.hoa,
            utilities=state.utilities,
        )
        year_noi = noi(egi, expenses["total"])

        # Debt
        debt = debt_service_year(
            balance=state.loan_balance,
            payment=payment,
            annual_rate=assumptions.interest_rate,
            purchase_price=assumptions.purchase_price,
            original_loan=loan_amount,
            pmi_rate=assumptions.pmi_rate,
        )
        state.loan_balance = debt.ending_balance
        annual_debt_service = debt.debt_service
        cash_flow = year_noi - annual_debt_service

        # Exit at year end, before this year's growth is applied
        proceeds = sale_proceeds(state.home_value, assumptions.selling_costs_pct, state.loan_balance)
        year_irr = irr_if_sold(cash_flows, cash_flow, proceeds)
        cash_flows.append(cash_flow)

        appreciation = appreciation_amount(state.home_value, assumptions.annual_appreciation)

        projections.append(PeriodRecord(
            year=year,
            irr=year_irr,
            cash_flow=cash_flow,
            cash_on_cash=cash_on_cash(cash_flow, total_cash_invested),
            cap_rate=cap_rate(year_noi, state.home_value),
            dscr=dscr(year_noi, annual_debt_service),
            roi=roi(cash_flow, debt.principal, appreciation, total_cash_invested),
            effective_gross_income=egi,
            operating_expenses=expenses["total"],
            noi=year_noi,
            principal=debt.principal,
            interest_pmi=debt.interest_pmi,
            pmi=debt.pmi,
            loan_balance=state.loan_balance,
            home_value=state.home_value,
            equity=state.home_value - state.loan_balance,
            sale_proceeds=proceeds,
            profit_if_sold=profit_if_sold(proceeds, total_cash_invested),
        ))

        state.roll_forward(assumptions)

    return ProjectionResult(
        yearly_projections=projections,
        total_cash_invested=total_cash_invested,
        loan_amount=loan_amount,
        monthly_payment=payment,
        one_percent_ratio=ratio,
        passes_one_percent_rule=passes_one_percent_rule(ratio),
    )
