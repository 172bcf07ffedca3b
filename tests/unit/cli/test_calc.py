"""Unit tests for tradejournal.cli.commands.calc."""

from decimal import Decimal

import click
import pytest

from tradejournal.cli.commands.calc import DECIMAL, calc_command


class TestDecimalParamType:
    """Test the Decimal click parameter."""

    def test_converts_string(self):
        """Strings become exact Decimals."""
        assert DECIMAL.convert("0.1", None, None) == Decimal("0.1")

    def test_passes_decimal_through(self):
        """Decimal defaults are returned unchanged."""
        value = Decimal("2.5")
        assert DECIMAL.convert(value, None, None) is value

    @pytest.mark.parametrize("raw", ["abc", "NaN", "-1"])
    def test_rejects_invalid(self, raw):
        """Non-numbers, NaN and negatives are rejected."""
        with pytest.raises(click.BadParameter):
            DECIMAL.convert(raw, None, None)


class TestCalcCommand:
    """Test the calc command."""

    def test_long_with_exit(self, cli_runner):
        """Net P&L after default fees and ROI."""
        result = cli_runner.invoke(calc_command, ["--entry", "100", "-q", "10", "--exit", "110"])

        assert result.exit_code == 0, result.output
        assert "$100.00" in result.output
        assert "$2.10" in result.output
        assert "$97.90" in result.output
        assert "9.79%" in result.output

    def test_fee_rate_override(self, cli_runner):
        """--fee-rate 0 removes fees."""
        result = cli_runner.invoke(calc_command, ["--entry", "100", "-q", "10", "--exit", "110", "--fee-rate", "0"])

        assert result.exit_code == 0, result.output
        assert "10.00%" in result.output

    def test_short_risk_reward(self, cli_runner):
        """Stop and target give the risk/reward ratio."""
        result = cli_runner.invoke(
            calc_command, ["--entry", "50", "-q", "20", "-d", "short", "--stop", "52", "--target", "44"]
        )

        assert result.exit_code == 0, result.output
        assert "$40.00" in result.output
        assert "$120.00" in result.output
        assert "1:3.00" in result.output

    def test_zero_quantity_exits_with_error(self, cli_runner):
        """Zero quantity cannot be calculated."""
        result = cli_runner.invoke(calc_command, ["--entry", "100", "-q", "0"])

        assert result.exit_code == 1
        assert "must be non-zero" in result.output

    def test_entry_required(self, cli_runner):
        """--entry is required."""
        result = cli_runner.invoke(calc_command, ["-q", "10"])

        assert result.exit_code == 2
