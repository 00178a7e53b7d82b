from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class PeriodRecord:
    year: int

    # Returns
    irr: Decimal = Decimal("0")  # If sold at end of this year
    cash_flow: Decimal = Decimal("0")  # Annual, after debt service
    cash_on_cash: Decimal = Decimal("0")
    cap_rate: Decimal = Decimal("0")  # NOI / current home value
    dscr: Decimal = Decimal("0")
    roi: Decimal = Decimal("0")  # (CF + principal + appreciation) / cash invested

    # Operations
    effective_gross_income: Decimal = Decimal("0")
    operating_expenses: Decimal = Decimal("0")
    noi: Decimal = Decimal("0")

    # Debt breakdown
    principal: Decimal = Decimal("0")
    interest_pmi: Decimal = Decimal("0")
    pmi: Decimal = Decimal("0")
    loan_balance: Decimal = Decimal("0")  # End of year

    # Equity
    home_value: Decimal = Decimal("0")
    equity: Decimal = Decimal("0")  # Value - loan balance
    sale_proceeds: Decimal = Decimal("0")  # Net of selling costs and payoff
    profit_if_sold: Decimal = Decimal("0")


@dataclass
class ProjectionResult:
    yearly_projections: list[PeriodRecord] = field(default_factory=list)

    # Setup
    total_cash_invested: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    monthly_payment: Decimal = Decimal("0")  # Principal + interest

    # 1% rule: monthly rent / (price + rehab)
    one_percent_ratio: Decimal = Decimal("0")
    passes_one_percent_rule: bool = False
