"""Behavioral pattern detection over a trade journal.

Mines the journal for observations worth surfacing to the trader:

- Patterns: best hour of day, winners closed faster than losers
- Risk warnings: current losing streak, oversized recent positions
- Opportunities: symbols with a high win rate

Input order is recency order: the most recent trade first, as the journal
API serves it. "Recent" checks look at the head of the list.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Sequence

import structlog

from tradejournal.analytics.models import PatternInsight, Trade
from tradejournal.analytics.pnl_engine import compute_trade_pnl

logger = structlog.get_logger()

DEFAULT_MIN_TRADES = 10

MIN_TRADES_PER_BUCKET = 5
PEAK_HOUR_WIN_RATE = 0.7
STRONG_SYMBOL_WIN_RATE = 0.8
MIN_HOLD_SAMPLES = 10
RECENT_STREAK_WINDOW = 20
LOSING_STREAK_ALERT = 3
RECENT_SIZE_WINDOW = 10
OVERSIZED_MULTIPLE = 2
OVERSIZED_ALERT_COUNT = 2


def detect_patterns(trades: Sequence[Trade], min_trades: int = DEFAULT_MIN_TRADES) -> list[PatternInsight]:
    """
    Run every detector over the journal.

    Args:
        trades: Trades, most recent first
        min_trades: Below this journal size nothing is reported

    Returns:
        Patterns, then risk warnings, then opportunities
    """
    if len(trades) < min_trades:
        logger.debug("patterns.skipped", trades=len(trades), min_trades=min_trades)
        return []

    insights: list[PatternInsight] = []
    for detector in (
        detect_peak_hour,
        detect_hold_time_asymmetry,
        detect_losing_streak,
        detect_oversized_positions,
        detect_strong_symbol,
    ):
        insight = detector(trades)
        if insight is not None:
            insights.append(insight)

    logger.debug("patterns.detected", trades=len(trades), insights=len(insights))
    return insights


def detect_peak_hour(trades: Sequence[Trade]) -> PatternInsight | None:
    """Hour of day (of trade open) with the best win rate, if above 70%."""
    hourly: dict[int, list[int]] = defaultdict(lambda: [0, 0])  # hour -> [wins, total]
    for trade in trades:
        if trade.is_open:
            continue
        stats = hourly[trade.created_at.hour]
        stats[1] += 1
        if compute_trade_pnl(trade) > 0:
            stats[0] += 1

    candidates = [
        (hour, wins / total, total) for hour, (wins, total) in sorted(hourly.items()) if total >= MIN_TRADES_PER_BUCKET
    ]
    if not candidates:
        return None

    hour, win_rate, _ = max(candidates, key=lambda c: c[1])
    if win_rate <= PEAK_HOUR_WIN_RATE:
        return None

    return PatternInsight(
        insight_type="pattern",
        confidence=min(win_rate, 0.95),
        title="Peak Performance Hour Identified",
        description=(
            f"Your win rate is {win_rate * 100:.1f}% when trading at {hour}:00. "
            "Consider focusing trades during this time."
        ),
        data={"hour": hour, "win_rate": win_rate},
    )


def detect_hold_time_asymmetry(trades: Sequence[Trade]) -> PatternInsight | None:
    """Winners held for less time than losers on average."""
    holds = [
        ((trade.updated_at - trade.created_at).total_seconds(), compute_trade_pnl(trade))
        for trade in trades
        if trade.is_closed and trade.updated_at is not None
    ]
    if len(holds) < MIN_HOLD_SAMPLES:
        return None

    win_holds = [seconds for seconds, pnl in holds if pnl > 0]
    loss_holds = [seconds for seconds, pnl in holds if pnl < 0]
    if not win_holds or not loss_holds:
        return None

    avg_win_hold = sum(win_holds) / len(win_holds)
    avg_loss_hold = sum(loss_holds) / len(loss_holds)
    if avg_win_hold >= avg_loss_hold:
        return None

    return PatternInsight(
        insight_type="pattern",
        confidence=0.8,
        title="Cut Losses Faster",
        description=(
            f"Your winning trades average {format_duration(avg_win_hold)} while losing trades average "
            f"{format_duration(avg_loss_hold)}. Consider tighter stop losses."
        ),
        data={"avg_win_hold_seconds": avg_win_hold, "avg_loss_hold_seconds": avg_loss_hold},
    )


def detect_losing_streak(trades: Sequence[Trade]) -> PatternInsight | None:
    """Consecutive losses among the most recent closed trades."""
    consecutive_losses = 0
    for trade in trades[:RECENT_STREAK_WINDOW]:
        if trade.is_open:
            continue
        if compute_trade_pnl(trade) < 0:
            consecutive_losses += 1
        else:
            break

    if consecutive_losses < LOSING_STREAK_ALERT:
        return None

    return PatternInsight(
        insight_type="risk-warning",
        confidence=min(0.9, 0.6 + consecutive_losses * 0.1),
        title="Losing Streak Alert",
        description=(
            f"You have {consecutive_losses} consecutive losses. "
            "Consider reducing position size or taking a break."
        ),
        data={"consecutive_losses": consecutive_losses},
    )


def detect_oversized_positions(trades: Sequence[Trade]) -> PatternInsight | None:
    """More than two recent positions above twice the recent average notional."""
    sizes = [trade.notional for trade in trades[:RECENT_SIZE_WINDOW]]
    if not sizes:
        return None

    avg_size = sum(sizes, Decimal("0")) / len(sizes)
    oversized = sum(1 for size in sizes if size > avg_size * OVERSIZED_MULTIPLE)
    if oversized <= OVERSIZED_ALERT_COUNT:
        return None

    return PatternInsight(
        insight_type="risk-warning",
        confidence=0.75,
        title="Position Size Warning",
        description=(
            f"{oversized} recent trades exceed {OVERSIZED_MULTIPLE}x average position size. Review risk management."
        ),
        data={"oversized_positions": oversized, "average_position": float(avg_size)},
    )


def detect_strong_symbol(trades: Sequence[Trade]) -> PatternInsight | None:
    """Symbol with the best win rate, if above 80% over at least five trades."""
    by_symbol: dict[str, list] = {}  # symbol -> [wins, total, total_pnl]
    for trade in trades:
        if trade.is_open:
            continue
        stats = by_symbol.setdefault(trade.symbol, [0, 0, Decimal("0")])
        pnl = compute_trade_pnl(trade)
        stats[1] += 1
        stats[2] += pnl
        if pnl > 0:
            stats[0] += 1

    candidates = [
        (symbol, wins / total, float(total_pnl) / total, total)
        for symbol, (wins, total, total_pnl) in by_symbol.items()
        if total >= MIN_TRADES_PER_BUCKET
    ]
    if not candidates:
        return None

    symbol, win_rate, avg_pnl, total = max(candidates, key=lambda c: c[1])
    if win_rate <= STRONG_SYMBOL_WIN_RATE:
        return None

    return PatternInsight(
        insight_type="opportunity",
        confidence=min(win_rate, 0.9),
        title=f"High-Performance Symbol: {symbol}",
        description=(
            f"{symbol} shows {win_rate * 100:.1f}% win rate over {total} trades. Consider increasing allocation."
        ),
        data={"symbol": symbol, "win_rate": win_rate, "avg_pnl": avg_pnl, "total": total},
    )


def format_duration(seconds: float) -> str:
    """Render a duration as "Xh Ym", or "Ym" under an hour."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
