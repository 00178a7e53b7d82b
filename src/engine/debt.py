"""Fixed-rate loan payment and annual debt service with PMI.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal, DecimalException

# PMI stays on while balance / original purchase price exceeds this
PMI_LTV_THRESHOLD = Decimal("0.8")


@dataclass(frozen=True)
class DebtServiceYear:
    principal: Decimal
    interest: Decimal
    pmi: Decimal
    ending_balance: Decimal

    @property
    def debt_service(self) -> Decimal:
        return self.principal + self.interest + self.pmi

    @property
    def interest_pmi(self) -> Decimal:
        return self.interest + self.pmi


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: int) -> Decimal:
    """Calculate fixed monthly mortgage payment (principal + interest)."""
    if principal <= 0:
        return Decimal("0")
    n = term_years * 12
    if n <= 0:
        # No amortization period: whole balance due at once
        return principal
    if annual_rate == 0:
        return principal / n

    r = annual_rate / 12
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    try:
        factor = (1 + r) ** n
    except DecimalException:
        # Term too long to represent: payment tends to interest-only
        return principal * r
    if factor == 1:
        return principal / n
    return principal * (r * factor) / (factor - 1)


def monthly_pmi(
    balance: Decimal,
    purchase_price: Decimal,
    original_loan: Decimal,
    pmi_rate: Decimal,
) -> Decimal:
    """PMI for one month, charged on the original loan amount.

    Eligibility is measured against the original purchase price, not the
    current value of the home.
    """
    if purchase_price <= 0 or balance / purchase_price <= PMI_LTV_THRESHOLD:
        return Decimal("0")
    return original_loan * pmi_rate / 12


def debt_service_year(
    balance: Decimal,
    payment: Decimal,
    annual_rate: Decimal,
    purchase_price: Decimal,
    original_loan: Decimal,
    pmi_rate: Decimal,
) -> DebtServiceYear:
    """Run twelve monthly payments starting from `balance`.

    A balance already at or below zero pays nothing. The payoff month pays
    only the remaining balance as principal.
    """
    r = annual_rate / 12
    total_principal = Decimal("0")
    total_interest = Decimal("0")
    total_pmi = Decimal("0")

    for _ in range(12):
        if balance <= 0:
            continue

        pmi = monthly_pmi(balance, purchase_price, original_loan, pmi_rate)
        interest = balance * r
        principal = payment - interest
        if balance < principal:
            principal = balance

        balance -= principal
        total_principal += principal
        total_interest += interest
        total_pmi += pmi

    return DebtServiceYear(
        principal=total_principal,
        interest=total_interest,
        pmi=total_pmi,
        ending_balance=balance,
    )
