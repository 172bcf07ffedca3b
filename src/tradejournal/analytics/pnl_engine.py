"""Realized P&L and performance statistics for a trade journal.

Single computation surface for every consumer (dashboard cards, exports,
CLI): callers never re-derive statistics themselves.

Ordering contract:
    Streaks and drawdown walk trades in the order the caller passes them.
    They are never re-sorted here. Callers that want chronological
    semantics pass trades sorted ascending by ``created_at``, e.g. via
    ``sort_trades_chronologically()``. Reversing the input reverses the
    running-total walk and therefore changes drawdown and streak values.

Rounding:
    P&L is exact Decimal. Statistics are computed on floats and rounded to
    2 decimals (half-up) once, when the result object is built.

Usage:
    >>> from tradejournal.analytics import pnl_engine
    >>> metrics = pnl_engine.compute_metrics(trades)
    >>> for sentence in pnl_engine.generate_insights(trades):
    ...     print(sentence)
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

import structlog

from tradejournal.analytics.models import AdvancedMetrics, Direction, Trade, TradeSummary

logger = structlog.get_logger()

_CENT = Decimal("0.01")

SHARPE_STRONG = 1.0
DRAWDOWN_WARNING_PCT = 20.0
PROFIT_FACTOR_STRONG = 2.0
PROFIT_FACTOR_WEAK = 1.0
WIN_STREAK_NOTABLE = 5


def compute_trade_pnl(trade: Trade) -> Decimal:
    """
    Calculate realized profit/loss for one trade.

    Args:
        trade: Trade record

    Returns:
        ``(exit - entry) x qty`` for longs, ``(entry - exit) x qty`` for
        shorts, ``0`` for open positions. Not rounded.

    Example:
        >>> trade = Trade(direction="short", entry_price=50, exit_price=45, quantity=20, created_at=now)
        >>> compute_trade_pnl(trade)
        Decimal('100')
    """
    if trade.exit_price is None:
        return Decimal("0")

    if trade.direction is Direction.LONG:
        return (trade.exit_price - trade.entry_price) * trade.quantity
    return (trade.entry_price - trade.exit_price) * trade.quantity


def closed_trade_pnls(trades: Iterable[Trade]) -> list[float]:
    """P&L of each closed trade, in the given order."""
    return [float(compute_trade_pnl(t)) for t in trades if t.is_closed]


def sort_trades_chronologically(trades: Iterable[Trade]) -> list[Trade]:
    """Return trades sorted ascending by ``created_at`` (stable for ties)."""
    return sorted(trades, key=lambda t: t.created_at)


def compute_metrics(trades: Sequence[Trade]) -> AdvancedMetrics:
    """
    Compute risk and distribution statistics over the closed trades.

    Open trades are ignored. With no closed trades every field is zero.

    Args:
        trades: Trades in caller order (see module docstring)

    Returns:
        AdvancedMetrics with floats rounded to 2 decimals
    """
    pnls = closed_trade_pnls(trades)

    logger.debug(
        "pnl_engine.metrics_computing",
        closed_trades=len(pnls),
        open_trades=len(trades) - len(pnls),
    )

    if not pnls:
        return AdvancedMetrics()

    wins = [p for p in pnls if p > 0]
    losses = [p for p in pnls if p < 0]

    gross_profit = sum(wins)
    gross_loss = abs(sum(losses))
    average_win = gross_profit / len(wins) if wins else 0.0
    average_loss = gross_loss / len(losses) if losses else 0.0

    if gross_loss > 0:
        profit_factor = gross_profit / gross_loss
    else:
        profit_factor = math.inf if gross_profit > 0 else 0.0

    # Break-even trades stay in the denominator
    win_rate = len(wins) / len(pnls)
    expectancy = win_rate * average_win - (1 - win_rate) * average_loss

    mean_pnl = sum(pnls) / len(pnls)
    volatility = _population_deviation(pnls, mean_pnl)
    sharpe = mean_pnl / volatility if volatility > 0 else 0.0

    downside = [p for p in pnls if p < mean_pnl]
    downside_deviation = _population_deviation(downside, mean_pnl)
    sortino = mean_pnl / downside_deviation if downside_deviation > 0 else 0.0

    win_streak, loss_streak = _longest_streaks(pnls)

    return AdvancedMetrics(
        sharpe_ratio=_round(sharpe),
        sortino=_round(sortino),
        max_drawdown=_round(_max_drawdown_pct(pnls)),
        win_streak=win_streak,
        loss_streak=loss_streak,
        profit_factor=_round(profit_factor),
        average_win=_round(average_win),
        average_loss=_round(average_loss),
        expectancy=_round(expectancy),
        volatility=_round(volatility),
    )


def generate_insights(trades: Sequence[Trade]) -> list[str]:
    """
    Describe the journal's metrics in plain sentences.

    Fixed thresholds: Sharpe above 1 or below 0, drawdown above 20%,
    profit factor above 2 or below 1, win streak above 5.

    Returns:
        Sentences in evaluation order (may be empty)
    """
    metrics = compute_metrics(trades)
    insights: list[str] = []

    if metrics.sharpe_ratio > SHARPE_STRONG:
        insights.append(f"Excellent risk-adjusted returns with Sharpe ratio of {metrics.sharpe_ratio:.2f}")
    elif metrics.sharpe_ratio < 0:
        insights.append("Consider reviewing strategy - negative Sharpe ratio indicates poor risk-adjusted returns")

    if metrics.max_drawdown > DRAWDOWN_WARNING_PCT:
        insights.append(f"High drawdown of {metrics.max_drawdown:.2f}% - consider risk management improvements")

    if metrics.profit_factor > PROFIT_FACTOR_STRONG:
        insights.append(
            f"Strong profit factor of {format_ratio(metrics.profit_factor)} indicates profitable strategy"
        )
    elif metrics.profit_factor < PROFIT_FACTOR_WEAK:
        insights.append("Profit factor below 1.0 suggests strategy needs refinement")

    if metrics.win_streak > WIN_STREAK_NOTABLE:
        insights.append(f"Impressive winning streak of {metrics.win_streak} trades")

    logger.debug("pnl_engine.insights_generated", count=len(insights))
    return insights


def summarize_trades(trades: Sequence[Trade]) -> TradeSummary:
    """
    Headline counts and totals.

    ``total_trades`` includes open positions; win rate and average P&L are
    over closed trades only.
    """
    closed = [t for t in trades if t.is_closed]
    pnls = [compute_trade_pnl(t) for t in closed]

    winning = sum(1 for p in pnls if p > 0)
    losing = sum(1 for p in pnls if p < 0)
    total_pnl = sum(pnls, Decimal("0"))

    win_rate = winning / len(closed) * 100 if closed else 0.0
    average_pnl = float(total_pnl) / len(closed) if closed else 0.0

    return TradeSummary(
        total_trades=len(trades),
        closed_trades=len(closed),
        open_trades=len(trades) - len(closed),
        winning_trades=winning,
        losing_trades=losing,
        total_pnl=total_pnl,
        win_rate=_round(win_rate),
        average_pnl=_round(average_pnl),
    )


def format_ratio(value: float) -> str:
    """Display a ratio with 2 decimals; infinity renders as the symbol."""
    if math.isinf(value):
        return "∞"
    return f"{value:.2f}"


def _population_deviation(values: Sequence[float], mean: float) -> float:
    """Square root of the mean squared distance from ``mean`` (divide by n)."""
    if not values:
        return 0.0
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def _max_drawdown_pct(pnls: Sequence[float]) -> float:
    """
    Largest peak-to-trough decline of the cumulative P&L curve, in percent.

    The peak starts at 0 and the denominator is floored at 1, so a curve
    that never rises above 1 is measured in absolute P&L units.
    """
    peak = 0.0
    running_total = 0.0
    max_dd = 0.0

    for pnl in pnls:
        running_total += pnl
        if running_total > peak:
            peak = running_total
        drawdown = (peak - running_total) / max(peak, 1.0) * 100
        if drawdown > max_dd:
            max_dd = drawdown

    return max_dd


def _longest_streaks(pnls: Sequence[float]) -> tuple[int, int]:
    """Longest consecutive (win, loss) runs. A break-even trade ends both."""
    current_win = current_loss = 0
    max_win = max_loss = 0

    for pnl in pnls:
        if pnl > 0:
            current_win += 1
            current_loss = 0
            max_win = max(max_win, current_win)
        elif pnl < 0:
            current_loss += 1
            current_win = 0
            max_loss = max(max_loss, current_loss)
        else:
            current_win = current_loss = 0

    return max_win, max_loss


def _round(value: float) -> float:
    if math.isinf(value) or math.isnan(value):
        return value
    return float(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP))
