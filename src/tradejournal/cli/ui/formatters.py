"""Rich table formatters for CLI output."""

from decimal import Decimal
from typing import Sequence

from rich.panel import Panel
from rich.table import Table

from tradejournal.analytics.models import AdvancedMetrics, PatternInsight, TradeCalculation, TradeSummary
from tradejournal.analytics.pnl_engine import format_ratio

_INSIGHT_STYLES = {
    "pattern": "cyan",
    "risk-warning": "red",
    "opportunity": "green",
}


def _format_currency(value: Decimal | float, precision: int = 2) -> str:
    """Format currency value, sign before the symbol."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(float(value)):,.{precision}f}"


def _get_color(value: Decimal | float) -> str:
    """Get color based on positive/negative value."""
    if value > 0:
        return "green"
    elif value < 0:
        return "red"
    return "white"


def _colored(text: str, value: Decimal | float) -> str:
    color = _get_color(value)
    return f"[{color}]{text}[/{color}]"


def create_summary_table(summary: TradeSummary) -> Table:
    """
    Create the journal summary table.

    Args:
        summary: Headline counts and totals

    Returns:
        Configured Rich Table
    """
    table = Table(title="Journal Summary", show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Total Trades", f"{summary.total_trades:,}")
    table.add_row("Closed Trades", f"{summary.closed_trades:,}")
    table.add_row("Open Positions", f"{summary.open_trades:,}")
    table.add_row("Winning Trades", f"[green]{summary.winning_trades:,}[/green]")
    table.add_row("Losing Trades", f"[red]{summary.losing_trades:,}[/red]")

    win_rate_color = "green" if summary.win_rate > 50 else "yellow" if summary.win_rate > 40 else "red"
    table.add_row("Win Rate", f"[{win_rate_color}]{summary.win_rate:.2f}%[/{win_rate_color}]")
    table.add_row("Total P&L", _colored(_format_currency(summary.total_pnl), summary.total_pnl))
    table.add_row("Average P&L", _colored(_format_currency(summary.average_pnl), summary.average_pnl))

    return table


def create_metrics_table(metrics: AdvancedMetrics) -> Table:
    """
    Create the advanced metrics table.

    Args:
        metrics: Computed metrics

    Returns:
        Configured Rich Table
    """
    table = Table(title="Advanced Metrics", show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    sharpe_color = "green" if metrics.sharpe_ratio > 1 else "yellow" if metrics.sharpe_ratio > 0 else "red"
    table.add_row("Sharpe Ratio", f"[{sharpe_color}]{metrics.sharpe_ratio:.2f}[/{sharpe_color}]")
    table.add_row("Sortino Ratio", f"{metrics.sortino:.2f}")
    table.add_row("Max Drawdown", f"[red]{metrics.max_drawdown:.2f}%[/red]")

    pf_color = "green" if metrics.profit_factor > 2 else "yellow" if metrics.profit_factor >= 1 else "red"
    table.add_row("Profit Factor", f"[{pf_color}]{format_ratio(metrics.profit_factor)}[/{pf_color}]")

    table.add_row("Average Win", f"[green]{_format_currency(metrics.average_win)}[/green]")
    table.add_row("Average Loss", f"[red]{_format_currency(metrics.average_loss)}[/red]")
    table.add_row("Expectancy", _colored(_format_currency(metrics.expectancy), metrics.expectancy))
    table.add_row("Volatility", _format_currency(metrics.volatility))
    table.add_row("Longest Win Streak", str(metrics.win_streak))
    table.add_row("Longest Loss Streak", str(metrics.loss_streak))

    return table


def create_insights_panel(insights: Sequence[str], patterns: Sequence[PatternInsight] = ()) -> Panel:
    """
    Create a panel listing insight sentences and detected patterns.

    Args:
        insights: Threshold insight sentences
        patterns: Pattern insights

    Returns:
        Rich Panel (shows a placeholder line when both are empty)
    """
    lines = [f"• {sentence}" for sentence in insights]
    for pattern in patterns:
        style = _INSIGHT_STYLES.get(pattern.insight_type, "white")
        lines.append(
            f"[{style}]• {pattern.title}[/{style}] [dim]({pattern.confidence:.0%})[/dim]\n  {pattern.description}"
        )

    if not lines:
        lines.append("[dim]No insights for this journal yet.[/dim]")

    return Panel("\n".join(lines), title="Insights", border_style="blue")


def create_calculation_table(calculation: TradeCalculation) -> Table:
    """
    Create the trade entry calculation table.

    Args:
        calculation: Calculated figures

    Returns:
        Configured Rich Table
    """
    table = Table(title="Trade Calculation", show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Gross P&L", _colored(_format_currency(calculation.gross_pnl), calculation.gross_pnl))
    table.add_row("Fees", _format_currency(calculation.fees))
    table.add_row("Net P&L", _colored(_format_currency(calculation.net_pnl), calculation.net_pnl))
    table.add_row("ROI", _colored(f"{float(calculation.roi):.2f}%", calculation.roi))

    if calculation.potential_loss is not None:
        table.add_row("Potential Loss", f"[red]{_format_currency(calculation.potential_loss)}[/red]")
    if calculation.potential_gain is not None:
        table.add_row("Potential Gain", f"[green]{_format_currency(calculation.potential_gain)}[/green]")
    if calculation.risk_reward is not None:
        table.add_row("Risk/Reward", f"1:{float(calculation.risk_reward):.2f}")

    return table
