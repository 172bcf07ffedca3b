"""Tests for trade entry calculations."""

from decimal import Decimal

from tradejournal.analytics.calculations import calculate_fees, calculate_trade, calculate_trade_for


class TestCalculateFees:
    """Test round-trip fee calculation."""

    def test_entry_and_exit(self):
        """0.1% of each side's notional."""
        fees = calculate_fees(Decimal("100"), Decimal("10"), Decimal("110"))

        assert fees == Decimal("2.1")

    def test_entry_only(self):
        """No exit, no exit fee."""
        assert calculate_fees(Decimal("100"), Decimal("10")) == Decimal("1")

    def test_custom_rate(self):
        """Fee rate is configurable."""
        fees = calculate_fees(Decimal("100"), Decimal("10"), Decimal("100"), fee_rate=Decimal("0.005"))

        assert fees == Decimal("10")


class TestCalculateTrade:
    """Test the trade entry calculator."""

    def test_missing_entry_returns_none(self):
        """Entry price is required."""
        assert calculate_trade(None, Decimal("10")) is None

    def test_zero_quantity_returns_none(self):
        """Quantity is required."""
        assert calculate_trade(Decimal("100"), Decimal("0")) is None

    def test_long_with_exit(self):
        """Gross, fees, net and ROI for a winning long."""
        calc = calculate_trade(Decimal("100"), Decimal("10"), "long", exit_price=Decimal("110"))

        assert calc is not None
        assert calc.gross_pnl == Decimal("100")
        assert calc.fees == Decimal("2.1")
        assert calc.net_pnl == Decimal("97.9")
        assert calc.roi == Decimal("9.79")

    def test_short_with_exit(self):
        """Short profits when price falls."""
        calc = calculate_trade(
            Decimal("50"), Decimal("20"), "short", exit_price=Decimal("45"), fee_rate=Decimal("0")
        )

        assert calc is not None
        assert calc.gross_pnl == Decimal("100")
        assert calc.net_pnl == Decimal("100")
        assert calc.roi == Decimal("10")

    def test_without_exit_realized_figures_zero(self):
        """Planning a trade: no realized numbers yet."""
        calc = calculate_trade(Decimal("100"), Decimal("10"), "long")

        assert calc is not None
        assert calc.gross_pnl == 0
        assert calc.fees == 0
        assert calc.roi == 0

    def test_risk_reward_long(self):
        """Stop 95 and target 115 on a long: risk 50, reward 150."""
        calc = calculate_trade(
            Decimal("100"), Decimal("10"), "long", stop_loss=Decimal("95"), take_profit=Decimal("115")
        )

        assert calc is not None
        assert calc.potential_loss == Decimal("50")
        assert calc.potential_gain == Decimal("150")
        assert calc.risk_reward == Decimal("3")

    def test_risk_reward_short(self):
        """Stop above and target below entry on a short."""
        calc = calculate_trade(
            Decimal("50"), Decimal("20"), "short", stop_loss=Decimal("52"), take_profit=Decimal("44")
        )

        assert calc is not None
        assert calc.potential_loss == Decimal("40")
        assert calc.potential_gain == Decimal("120")
        assert calc.risk_reward == Decimal("3")

    def test_stop_only_has_no_risk_reward(self):
        """Risk/reward needs both levels."""
        calc = calculate_trade(Decimal("100"), Decimal("10"), "long", stop_loss=Decimal("95"))

        assert calc is not None
        assert calc.potential_loss == Decimal("50")
        assert calc.potential_gain is None
        assert calc.risk_reward is None

    def test_for_journaled_trade(self, make_trade):
        """Journaled trades run through the same calculator."""
        trade = make_trade("long", entry=100, exit=110, quantity=10)

        calc = calculate_trade_for(trade, fee_rate=Decimal("0"))

        assert calc is not None
        assert calc.net_pnl == Decimal("100")
        assert calc.roi == Decimal("10")
