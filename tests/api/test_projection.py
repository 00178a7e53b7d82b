"""Tests for the projection API and its input parsing."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.api.app import app
from src.api.schemas import ProjectionRequest, parse_number


@pytest.fixture
def client():
    return TestClient(app)


class TestParseNumber:
    def test_thousands_separators(self):
        assert parse_number("300,000") == Decimal("300000")

    def test_plain_numbers(self):
        assert parse_number(7) == Decimal("7")
        assert parse_number(0.6) == Decimal("0.6")
        assert parse_number("6.5") == Decimal("6.5")

    def test_leading_numeric_part(self):
        assert parse_number("2500/mo") == Decimal("2500")

    def test_unparseable_is_zero(self):
        assert parse_number("abc") == Decimal("0")
        assert parse_number("") == Decimal("0")
        assert parse_number(None) == Decimal("0")
        assert parse_number(float("nan")) == Decimal("0")

    def test_beyond_double_range_is_zero(self):
        assert parse_number("1e999999") == Decimal("0")
        assert parse_number("-1e400") == Decimal("0")
        assert parse_number(10 ** 400) == Decimal("0")
        assert parse_number("1e308") == Decimal("1e308")


class TestProjectionRequest:
    def test_defaults_match_calculator(self):
        assumptions = ProjectionRequest().to_assumptions()
        assert assumptions.purchase_price == Decimal("300000")
        assert assumptions.after_repair_value == Decimal("350000")
        assert assumptions.down_payment_pct == Decimal("0.2")
        assert assumptions.interest_rate == Decimal("0.07")
        assert assumptions.loan_term_years == 30
        assert assumptions.pmi_rate == Decimal("0.006")
        assert assumptions.selling_costs_pct == Decimal("0.08")
        assert assumptions.total_cash_invested == Decimal("89000")

    def test_form_strings(self):
        req = ProjectionRequest(purchase_price="250,000", mortgage_rate="6.5", loan_term="15", hoa_fees="n/a")
        assumptions = req.to_assumptions()
        assert assumptions.purchase_price == Decimal("250000")
        assert assumptions.interest_rate == Decimal("0.065")
        assert assumptions.loan_term_years == 15
        assert assumptions.hoa == Decimal("0")

    def test_fractional_term_truncates(self):
        assert ProjectionRequest(loan_term="29.9").loan_term == 29


class TestProjectionAPI:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_defaults_endpoint(self, client):
        resp = client.get("/api/v1/projection/defaults")
        assert resp.status_code == 200
        body = resp.json()
        assert Decimal(body["purchase_price"]) == Decimal("300000")
        assert body["loan_term"] == 30

    def test_default_projection(self, client):
        resp = client.post("/api/v1/projection", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert Decimal(body["total_cash_invested"]) == Decimal("89000")
        assert Decimal(body["loan_amount"]) == Decimal("240000")
        assert Decimal(body["monthly_payment"]) == Decimal("1596.73")
        assert len(body["yearly_projections"]) == 40
        assert body["kpis"]["one_percent_rule"] == "Fail"
        assert Decimal(body["kpis"]["one_percent_ratio"]) == Decimal("0.0078")

    def test_year_1_rounded(self, client):
        body = client.post("/api/v1/projection", json={}).json()
        first = body["yearly_projections"][0]
        assert first["year"] == 1
        assert Decimal(first["noi"]) == Decimal("15780.00")
        assert Decimal(first["home_value"]) == Decimal("350000.00")
        assert Decimal(first["cap_rate"]) == Decimal("0.0451")

    def test_milestones(self, client):
        body = client.post("/api/v1/projection", json={}).json()
        assert body["milestone_years"] == [1, 5, 10, 30]
        labels = [row["label"] for row in body["milestones"]]
        assert "IRR (if Sold)" in labels
        assert all(len(row["values"]) == 4 for row in body["milestones"])

    def test_form_values_accepted(self, client):
        resp = client.post(
            "/api/v1/projection",
            json={"purchase_price": "300,000", "down_payment_pct": 100, "gross_monthly_rent": "3,200"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert Decimal(body["loan_amount"]) == Decimal("0")
        assert body["kpis"]["one_percent_rule"] == "Pass"
        for year in body["yearly_projections"]:
            assert Decimal(year["interest_pmi"]) == Decimal("0")
            assert Decimal(year["dscr"]) == Decimal("0")

    def test_unrepresentable_loan_term(self, client):
        resp = client.post("/api/v1/projection", json={"loan_term": "1e15"})
        assert resp.status_code == 200
        assert Decimal(resp.json()["monthly_payment"]) == Decimal("1400.00")

    def test_out_of_range_rate_reads_as_zero(self, client):
        resp = client.post("/api/v1/projection", json={"mortgage_rate": "1e999999"})
        assert resp.status_code == 200
        assert Decimal(resp.json()["monthly_payment"]) == Decimal("666.67")

    def test_malformed_body(self, client):
        resp = client.post("/api/v1/projection", json=[1, 2, 3])
        assert resp.status_code == 422
