"""Pydantic schemas for API request/response models."""

import re
from decimal import Decimal

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.models.assumptions import DealAssumptions

_NUMBER_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
HUNDRED = Decimal("100")
# Largest finite double; form values beyond it read as unparseable
MAX_INPUT = Decimal("1.7976931348623157e308")


def parse_number(value) -> Decimal:
    """Parse a form value the way the calculator's inputs are read.

    Thousands separators are stripped and the leading numeric part is used.
    Anything unparseable, or too large to be a finite number, becomes 0.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, (int, float, Decimal)):
        d = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        return _bounded(d)

    match = _NUMBER_PREFIX.match(str(value).replace(",", "").strip())
    if match is None:
        return Decimal("0")
    return _bounded(Decimal(match.group(0)))


def _bounded(d: Decimal) -> Decimal:
    if not d.is_finite() or d.copy_abs() > MAX_INPUT:
        return Decimal("0")
    return d


# ---- Request schemas ----

class ProjectionRequest(BaseModel):
    """Raw calculator inputs. Money in dollars, rates in percent (7.0 = 7%).

    Defaults are the calculator's reset values.
    """

    # Purchase
    purchase_price: Decimal = Field(Decimal("300000"), description="Purchase price ($)")
    rehab_costs: Decimal = Field(Decimal("20000"), description="Rehab budget ($)")
    arv: Decimal = Field(Decimal("350000"), description="After-repair value ($)")
    closing_costs_pct: Decimal = Field(Decimal("3.0"), description="Buyer closing costs (% of price)")

    # Financing
    down_payment_pct: Decimal = Decimal("20")
    mortgage_rate: Decimal = Decimal("7.0")
    loan_term: int = 30
    pmi_pct: Decimal = Field(Decimal("0.6"), description="Annual PMI (% of loan)")

    # Income & expenses
    gross_monthly_rent: Decimal = Decimal("2500")
    property_taxes: Decimal = Field(Decimal("3600"), description="Annual property taxes ($)")
    insurance_pct: Decimal = Field(Decimal("0.6"), description="Annual insurance (% of price)")
    hoa_fees: Decimal = Field(Decimal("0"), description="Monthly HOA ($)")
    vacancy_rate: Decimal = Decimal("6.0")
    utilities: Decimal = Field(Decimal("50"), description="Monthly utilities ($)")
    repairs_pct: Decimal = Decimal("6.0")
    capex_pct: Decimal = Decimal("6.0")
    management_pct: Decimal = Decimal("10.0")

    # Growth & exit
    appreciation_home: Decimal = Decimal("3.0")
    appreciation_rent: Decimal = Decimal("3.0")
    inflation_costs: Decimal = Decimal("3.0")
    sale_closing_costs: Decimal = Decimal("8.0")

    @field_validator("*", mode="before")
    @classmethod
    def _parse_form_value(cls, v, info: ValidationInfo):
        number = parse_number(v)
        if info.field_name == "loan_term":
            return int(number)
        return number

    def to_assumptions(self) -> DealAssumptions:
        """Convert percentages to fractions and build engine assumptions."""
        return DealAssumptions(
            purchase_price=self.purchase_price,
            rehab_cost=self.rehab_costs,
            after_repair_value=self.arv,
            closing_costs_pct=self.closing_costs_pct / HUNDRED,
            down_payment_pct=self.down_payment_pct / HUNDRED,
            interest_rate=self.mortgage_rate / HUNDRED,
            loan_term_years=self.loan_term,
            pmi_rate=self.pmi_pct / HUNDRED,
            monthly_rent=self.gross_monthly_rent,
            vacancy_rate=self.vacancy_rate / HUNDRED,
            property_tax=self.property_taxes,
            insurance_pct=self.insurance_pct / HUNDRED,
            hoa=self.hoa_fees,
            utilities=self.utilities,
            repairs_pct=self.repairs_pct / HUNDRED,
            capex_reserve_pct=self.capex_pct / HUNDRED,
            management_pct=self.management_pct / HUNDRED,
            annual_appreciation=self.appreciation_home / HUNDRED,
            annual_rent_growth=self.appreciation_rent / HUNDRED,
            annual_expense_growth=self.inflation_costs / HUNDRED,
            selling_costs_pct=self.sale_closing_costs / HUNDRED,
        )


# ---- Response schemas ----

class PeriodRecordResponse(BaseModel):
    year: int
    irr: Decimal
    cash_flow: Decimal
    cash_on_cash: Decimal
    cap_rate: Decimal
    dscr: Decimal
    principal: Decimal
    interest_pmi: Decimal
    operating_expenses: Decimal
    effective_gross_income: Decimal
    noi: Decimal
    roi: Decimal
    home_value: Decimal
    loan_balance: Decimal
    equity: Decimal
    profit_if_sold: Decimal


class KPIResponse(BaseModel):
    monthly_cash_flow: Decimal
    cash_on_cash: Decimal
    cap_rate: Decimal
    one_percent_ratio: Decimal
    one_percent_rule: str


class MilestoneRowResponse(BaseModel):
    label: str
    metric: str
    values: list[Decimal | None]


class ProjectionResponse(BaseModel):
    total_cash_invested: Decimal
    loan_amount: Decimal
    monthly_payment: Decimal
    kpis: KPIResponse
    milestone_years: list[int]
    milestones: list[MilestoneRowResponse]
    yearly_projections: list[PeriodRecordResponse]
