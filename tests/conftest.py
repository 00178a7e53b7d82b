"""Canonical test fixtures used across all engine tests.

Fixture: $300K single-family rental, $20K rehab, $350K ARV, 20% down,
7% rate, 30yr fixed, $2,500/mo rent.
"""

import pytest
from dataclasses import replace
from decimal import Decimal

from src.models.assumptions import DealAssumptions


@pytest.fixture
def canonical_assumptions() -> DealAssumptions:
    """The calculator's default deal."""
    return DealAssumptions(
        purchase_price=Decimal("300000"),
        rehab_cost=Decimal("20000"),
        after_repair_value=Decimal("350000"),
        closing_costs_pct=Decimal("0.03"),
        down_payment_pct=Decimal("0.20"),
        interest_rate=Decimal("0.07"),
        loan_term_years=30,
        pmi_rate=Decimal("0.006"),
        monthly_rent=Decimal("2500"),
        vacancy_rate=Decimal("0.06"),
        property_tax=Decimal("3600"),
        insurance_pct=Decimal("0.006"),
        hoa=Decimal("0"),
        utilities=Decimal("50"),
        repairs_pct=Decimal("0.06"),
        capex_reserve_pct=Decimal("0.06"),
        management_pct=Decimal("0.10"),
        annual_appreciation=Decimal("0.03"),
        annual_rent_growth=Decimal("0.03"),
        annual_expense_growth=Decimal("0.03"),
        selling_costs_pct=Decimal("0.08"),
    )


@pytest.fixture
def all_cash_assumptions(canonical_assumptions) -> DealAssumptions:
    """Same deal bought outright: no loan."""
    return replace(canonical_assumptions, down_payment_pct=Decimal("1"))


@pytest.fixture
def low_down_assumptions(canonical_assumptions) -> DealAssumptions:
    """10% down: 90% loan-to-price, so PMI applies until paid down to 80%."""
    return replace(canonical_assumptions, down_payment_pct=Decimal("0.10"))


@pytest.fixture
def zero_rate_assumptions(canonical_assumptions) -> DealAssumptions:
    """$450K price, 20% down -> $360K interest-free loan, $1,000/mo for 30 years."""
    return replace(
        canonical_assumptions,
        purchase_price=Decimal("450000"),
        interest_rate=Decimal("0"),
    )
