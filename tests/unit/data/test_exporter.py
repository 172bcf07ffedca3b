"""Tests for CSV exports."""

import csv

from tradejournal.data.exporter import (
    TRADE_COLUMNS,
    export_performance_report,
    export_trades_csv,
    performance_rows,
    trade_rows,
)


def _read(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


class TestTradeRows:
    """Test trade export rows."""

    def test_closed_trade_row(self, make_trade):
        """Closed trades show exit price, P&L and status."""
        trade = make_trade(
            "long",
            100,
            110,
            10,
            symbol="AAPL",
            tags=["breakout", "momentum"],
            emotional_state="confident",
            notes="Clean breakout",
        )

        assert trade_rows([trade]) == [
            [
                "2025-03-03",
                "AAPL",
                "LONG",
                "100",
                "110",
                "10",
                "100.00",
                "Closed",
                "breakout; momentum",
                "confident",
                "Clean breakout",
            ]
        ]

    def test_open_trade_row(self, make_trade):
        """Open trades have no exit and zero P&L."""
        trade = make_trade("short", 200, None, 5, symbol="MSFT")

        row = trade_rows([trade])[0]

        assert row[2:8] == ["SHORT", "200", "N/A", "5", "0.00", "Open"]
        assert row[8:] == ["", "", ""]

    def test_custom_date_format(self, make_trade):
        """Date column follows the configured format."""
        row = trade_rows([make_trade()], date_format="%d/%m/%Y")[0]

        assert row[0] == "03/03/2025"


class TestPerformanceRows:
    """Test performance report rows."""

    def test_sections_and_values(self, sample_trades):
        """Summary block, blank separator, then advanced metrics."""
        rows = performance_rows(sample_trades)
        values = {row[0]: row[1] for row in rows if len(row) == 2}

        assert rows[0] == ["Performance Summary", ""]
        assert [] in rows
        assert ["Advanced Metrics", ""] in rows
        assert values["Total Trades"] == "4"
        assert values["Closed Trades"] == "3"
        assert values["Total P&L"] == "$190.00"
        assert values["Win Rate"] == "66.7%"
        assert values["Profit Factor"] == "20.00"
        assert values["Max Drawdown"] == "5.00%"
        assert values["Average Loss"] == "$10.00"
        assert values["Win Streak"] == "2"

    def test_infinite_profit_factor(self, pnl_trades):
        """No losses renders the profit factor as the infinity symbol."""
        values = {row[0]: row[1] for row in performance_rows(pnl_trades([10, 20])) if len(row) == 2}

        assert values["Profit Factor"] == "∞"


class TestExportFiles:
    """Test writing export files."""

    def test_export_trades_csv(self, tmp_path, sample_trades):
        """Header plus one quoted row per trade; parents are created."""
        path = export_trades_csv(sample_trades, tmp_path / "out" / "trades.csv")

        rows = _read(path)
        assert path.exists()
        assert rows[0] == TRADE_COLUMNS
        assert len(rows) == 5
        assert rows[4][7] == "Open"
        assert path.read_text(encoding="utf-8").startswith('"Date","Symbol"')

    def test_export_performance_report(self, tmp_path, sample_trades):
        """Report file matches performance_rows()."""
        path = export_performance_report(sample_trades, tmp_path / "report.csv")

        assert _read(path) == performance_rows(sample_trades)

    def test_empty_journal(self, tmp_path):
        """An empty journal still produces a header and zero metrics."""
        trades_path = export_trades_csv([], tmp_path / "trades.csv")
        report_path = export_performance_report([], tmp_path / "report.csv")

        assert _read(trades_path) == [TRADE_COLUMNS]
        values = {row[0]: row[1] for row in _read(report_path) if len(row) == 2}
        assert values["Total Trades"] == "0"
        assert values["Sharpe Ratio"] == "0.00"
