"""Cash flow analysis: EGI, operating expenses, NOI and return ratios.

Pure functions: Decimal in, Decimal out. No I/O.

Every ratio returns 0 when its denominator is zero or negative, so a
degenerate deal produces zeros rather than an exception.
"""

from decimal import Decimal

from src.models.assumptions import DealAssumptions

ONE_PERCENT_RULE = Decimal("0.01")


def _ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    if denominator <= 0:
        return Decimal("0")
    return numerator / denominator


def gross_rent(monthly_rent: Decimal) -> Decimal:
    return monthly_rent * 12


def effective_gross_income(gross: Decimal, vacancy_rate: Decimal) -> Decimal:
    """EGI = gross rent - vacancy loss."""
    return gross - gross * vacancy_rate


def operating_expenses(
    assumptions: DealAssumptions,
    gross: Decimal,
    egi: Decimal,
    property_tax: Decimal,
    insurance: Decimal,
    hoa: Decimal,
    utilities: Decimal,
) -> dict[str, Decimal]:
    """Itemized annual operating expenses.

    Fixed costs are passed in at their current (inflated) annual amounts.
    Management is a share of EGI; repairs and capex are shares of gross rent.
    """
    management = egi * assumptions.management_pct
    repairs = gross * assumptions.repairs_pct
    capex = gross * assumptions.capex_reserve_pct

    total = property_tax + insurance + hoa + utilities + management + repairs + capex

    return {
        "property_tax": property_tax,
        "insurance": insurance,
        "hoa": hoa,
        "utilities": utilities,
        "management": management,
        "repairs": repairs,
        "capex_reserve": capex,
        "total": total,
    }


def noi(egi: Decimal, total_expenses: Decimal) -> Decimal:
    """Net Operating Income = EGI - operating expenses."""
    return egi - total_expenses


def cap_rate(noi_amount: Decimal, home_value: Decimal) -> Decimal:
    """Cap rate = NOI / current home value."""
    return _ratio(noi_amount, home_value)


def cash_on_cash(cash_flow: Decimal, total_cash_invested: Decimal) -> Decimal:
    """Cash-on-cash return = annual cash flow / total cash invested."""
    return _ratio(cash_flow, total_cash_invested)


def dscr(noi_amount: Decimal, annual_debt_service: Decimal) -> Decimal:
    """Debt Service Coverage Ratio = NOI / annual debt service."""
    return _ratio(noi_amount, annual_debt_service)


def appreciation_amount(home_value: Decimal, annual_appreciation: Decimal) -> Decimal:
    """Value gained over the year that ended at `home_value`."""
    if annual_appreciation == -1:
        return Decimal("0")
    return home_value - home_value / (1 + annual_appreciation)


def roi(
    cash_flow: Decimal,
    principal_paid: Decimal,
    appreciation: Decimal,
    total_cash_invested: Decimal,
) -> Decimal:
    """Total return on cash: cash flow + loan paydown + appreciation."""
    return _ratio(cash_flow + principal_paid + appreciation, total_cash_invested)


def one_percent_ratio(assumptions: DealAssumptions) -> Decimal:
    """Monthly rent as a share of all-in cost (price + rehab)."""
    return _ratio(assumptions.monthly_rent, assumptions.total_cost)


def passes_one_percent_rule(ratio: Decimal) -> bool:
    return ratio >= ONE_PERCENT_RULE
