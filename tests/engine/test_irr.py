from decimal import Decimal

from scipy.optimize import brentq

from src.engine.irr import compute_irr


def _reference_irr(cash_flows: list[Decimal]) -> float:
    cf = [float(c) for c in cash_flows]
    return brentq(lambda r: sum(c / (1 + r) ** t for t, c in enumerate(cf)), -0.5, 10.0, xtol=1e-12)


class TestIRR:
    def test_simple_irr(self):
        """Invest $1,000, get $1,100 after 1 year = 10% IRR."""
        irr = compute_irr([Decimal("-1000"), Decimal("1100")])
        assert abs(irr - Decimal("0.10")) < Decimal("1e-6")

    def test_two_year_zero_coupon(self):
        irr = compute_irr([Decimal("-100"), Decimal("0"), Decimal("121")])
        assert abs(irr - Decimal("0.10")) < Decimal("1e-6")

    def test_multi_year_matches_brent(self):
        cfs = [Decimal("-100000"), Decimal("10000"), Decimal("10000"),
               Decimal("10000"), Decimal("10000"), Decimal("130000")]
        irr = compute_irr(cfs)
        assert abs(float(irr) - _reference_irr(cfs)) < 1e-6

    def test_negative_irr_matches_brent(self):
        cfs = [Decimal("-50000"), Decimal("-2000"), Decimal("1000"), Decimal("30000")]
        irr = compute_irr(cfs)
        assert irr < 0
        assert abs(float(irr) - _reference_irr(cfs)) < 1e-6

    def test_custom_guess(self):
        irr = compute_irr([Decimal("-1000"), Decimal("1100")], guess=Decimal("0.5"))
        assert abs(irr - Decimal("0.10")) < Decimal("1e-6")

    def test_does_not_mutate_input(self):
        cfs = [Decimal("-1000"), Decimal("500"), Decimal("700")]
        compute_irr(cfs)
        assert cfs == [Decimal("-1000"), Decimal("500"), Decimal("700")]


class TestIRRDegenerate:
    """Degenerate streams return a finite number instead of raising."""

    def test_empty_cash_flows(self):
        assert compute_irr([]) == Decimal("0.10")

    def test_single_flow_returns_guess(self):
        # Derivative is identically zero
        assert compute_irr([Decimal("-1000")]) == Decimal("0.10")

    def test_all_zero(self):
        assert compute_irr([Decimal("0")] * 10) == Decimal("0.10")

    def test_all_negative(self):
        irr = compute_irr([Decimal("-100"), Decimal("-10"), Decimal("-10")])
        assert irr.is_finite()

    def test_all_positive(self):
        irr = compute_irr([Decimal("100"), Decimal("100")])
        assert irr.is_finite()

    def test_zero_outlay(self):
        irr = compute_irr([Decimal("0"), Decimal("-600")])
        assert irr.is_finite()

    def test_long_oscillating_stream(self):
        cfs = [Decimal("-1000")] + [Decimal("5000") if t % 2 else Decimal("-5000") for t in range(1, 41)]
        irr = compute_irr(cfs)
        assert irr.is_finite()

    def test_guess_of_minus_one_returns_guess(self):
        # 1 + rate = 0 makes every discount factor undefined
        assert compute_irr([Decimal("-1000"), Decimal("1100")], guess=Decimal("-1")) == Decimal("-1")
