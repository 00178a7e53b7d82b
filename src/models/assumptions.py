from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DealAssumptions:
    # Purchase
    purchase_price: Decimal
    rehab_cost: Decimal = Decimal("0")
    after_repair_value: Decimal = Decimal("0")  # Starting home value
    closing_costs_pct: Decimal = Decimal("0.03")  # % of purchase price

    # Financing
    down_payment_pct: Decimal = Decimal("0.20")
    interest_rate: Decimal = Decimal("0.07")  # Annual
    loan_term_years: int = 30
    pmi_rate: Decimal = Decimal("0.006")  # Annual, % of original loan

    # Income
    monthly_rent: Decimal = Decimal("0")
    vacancy_rate: Decimal = Decimal("0.06")

    # Expenses
    property_tax: Decimal = Decimal("0")  # Annual
    insurance_pct: Decimal = Decimal("0.006")  # Annual, % of purchase price
    hoa: Decimal = Decimal("0")  # Monthly
    utilities: Decimal = Decimal("0")  # Monthly
    repairs_pct: Decimal = Decimal("0.06")  # % of gross rent
    capex_reserve_pct: Decimal = Decimal("0.06")  # % of gross rent
    management_pct: Decimal = Decimal("0.10")  # % of EGI

    # Growth
    annual_appreciation: Decimal = Decimal("0.03")
    annual_rent_growth: Decimal = Decimal("0.03")
    annual_expense_growth: Decimal = Decimal("0.03")

    # Exit
    selling_costs_pct: Decimal = Decimal("0.08")

    @property
    def down_payment(self) -> Decimal:
        return self.purchase_price * self.down_payment_pct

    @property
    def closing_costs(self) -> Decimal:
        return self.purchase_price * self.closing_costs_pct

    @property
    def loan_amount(self) -> Decimal:
        return self.purchase_price - self.down_payment

    @property
    def total_cash_invested(self) -> Decimal:
        """Cash out of pocket at closing: down payment + closing costs + rehab."""
        return self.down_payment + self.closing_costs + self.rehab_cost

    @property
    def total_cost(self) -> Decimal:
        return self.purchase_price + self.rehab_cost

    @property
    def annual_insurance(self) -> Decimal:
        return self.purchase_price * self.insurance_pct
