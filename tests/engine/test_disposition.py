from decimal import Decimal

from src.engine.disposition import sale_proceeds, profit_if_sold, irr_if_sold


class TestSaleProceeds:
    def test_net_of_costs_and_payoff(self):
        proceeds = sale_proceeds(Decimal("350000"), Decimal("0.08"), Decimal("237000"))
        assert proceeds == Decimal("322000") - Decimal("237000")

    def test_underwater_sale(self):
        proceeds = sale_proceeds(Decimal("200000"), Decimal("0.08"), Decimal("240000"))
        assert proceeds < 0

    def test_profit_if_sold(self):
        assert profit_if_sold(Decimal("85000"), Decimal("89000")) == Decimal("-4000")


class TestIRRIfSold:
    def test_history_not_mutated(self):
        history = [Decimal("-1000")]
        irr = irr_if_sold(history, Decimal("100"), Decimal("1000"))
        assert history == [Decimal("-1000")]
        assert abs(irr - Decimal("0.10")) < Decimal("1e-6")

    def test_terminal_year_includes_cash_flow_and_sale(self):
        history = [Decimal("-100"), Decimal("0")]
        irr = irr_if_sold(history, Decimal("21"), Decimal("100"))
        assert abs(irr - Decimal("0.10")) < Decimal("1e-6")
