"""CSV exports of the trade journal.

Two files, both fully quoted:

- Trade export: one row per trade with its realized P&L and status
- Performance report: summary section followed by advanced metrics

Statistics come from the P&L engine; nothing is recomputed here.
"""

import csv
from pathlib import Path
from typing import Sequence

import structlog

from tradejournal.analytics.models import Trade
from tradejournal.analytics.pnl_engine import compute_metrics, compute_trade_pnl, format_ratio, summarize_trades

logger = structlog.get_logger()

TRADE_COLUMNS = [
    "Date",
    "Symbol",
    "Direction",
    "Entry Price",
    "Exit Price",
    "Quantity",
    "P&L",
    "Status",
    "Tags",
    "Emotional State",
    "Notes",
]


def trade_rows(trades: Sequence[Trade], date_format: str = "%Y-%m-%d") -> list[list[str]]:
    """Format trades as CSV rows (header excluded)."""
    rows = []
    for trade in trades:
        rows.append(
            [
                trade.created_at.strftime(date_format),
                trade.symbol,
                trade.direction.value.upper(),
                str(trade.entry_price),
                str(trade.exit_price) if trade.is_closed else "N/A",
                str(trade.quantity),
                f"{compute_trade_pnl(trade):.2f}",
                "Closed" if trade.is_closed else "Open",
                "; ".join(trade.tags),
                trade.emotional_state or "",
                trade.notes or "",
            ]
        )
    return rows


def performance_rows(trades: Sequence[Trade]) -> list[list[str]]:
    """Format the summary and advanced metrics as Metric/Value rows."""
    summary = summarize_trades(trades)
    metrics = compute_metrics(trades)

    return [
        ["Performance Summary", ""],
        ["Metric", "Value"],
        ["Total Trades", str(summary.total_trades)],
        ["Closed Trades", str(summary.closed_trades)],
        ["Total P&L", f"${summary.total_pnl:.2f}"],
        ["Win Rate", f"{summary.win_rate:.1f}%"],
        ["Winning Trades", str(summary.winning_trades)],
        [],
        ["Advanced Metrics", ""],
        ["Metric", "Value"],
        ["Sharpe Ratio", f"{metrics.sharpe_ratio:.2f}"],
        ["Sortino Ratio", f"{metrics.sortino:.2f}"],
        ["Max Drawdown", f"{metrics.max_drawdown:.2f}%"],
        ["Profit Factor", format_ratio(metrics.profit_factor)],
        ["Average Win", f"${metrics.average_win:.2f}"],
        ["Average Loss", f"${metrics.average_loss:.2f}"],
        ["Expectancy", f"${metrics.expectancy:.2f}"],
        ["Volatility", f"${metrics.volatility:.2f}"],
        ["Win Streak", str(metrics.win_streak)],
        ["Loss Streak", str(metrics.loss_streak)],
    ]


def export_trades_csv(trades: Sequence[Trade], path: Path | str, date_format: str = "%Y-%m-%d") -> Path:
    """
    Write the trade export.

    Args:
        trades: Trades in display order
        path: Destination file (parent directories are created)
        date_format: strftime format for the Date column

    Returns:
        Path written
    """
    path = _write_rows(Path(path), [TRADE_COLUMNS, *trade_rows(trades, date_format)])
    logger.info("exporter.trades_written", path=str(path), trades=len(trades))
    return path


def export_performance_report(trades: Sequence[Trade], path: Path | str) -> Path:
    """
    Write the performance report.

    Order-dependent metrics (drawdown, streaks) follow the order of ``trades``.

    Returns:
        Path written
    """
    path = _write_rows(Path(path), performance_rows(trades))
    logger.info("exporter.report_written", path=str(path), trades=len(trades))
    return path


def _write_rows(path: Path, rows: list[list[str]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, quoting=csv.QUOTE_ALL)
        writer.writerows(rows)
    return path
