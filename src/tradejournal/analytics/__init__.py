"""Trade journal analytics.

1. **Models** (`models.py`): Pydantic data structures
   - Trade: Journaled trade (open or closed)
   - AdvancedMetrics: Risk and distribution statistics
   - TradeSummary: Headline counts and totals
   - TradeCalculation: Trade entry figures (fees, ROI, risk/reward)
   - PatternInsight: Behavioral observations

2. **P&L engine** (`pnl_engine.py`): Pure calculation functions
   - compute_trade_pnl, compute_metrics, generate_insights, summarize_trades

3. **Calculations** (`calculations.py`): Trade entry calculator

4. **Patterns** (`patterns.py`): Pattern, risk and opportunity detection

Usage:
    >>> from tradejournal.analytics import compute_metrics
    >>> metrics = compute_metrics(trades)
    >>> print(f"Sharpe: {metrics.sharpe_ratio}")
"""

from tradejournal.analytics.calculations import calculate_fees, calculate_trade, calculate_trade_for
from tradejournal.analytics.models import (
    AdvancedMetrics,
    Direction,
    PatternInsight,
    Trade,
    TradeCalculation,
    TradeSummary,
)
from tradejournal.analytics.patterns import detect_patterns
from tradejournal.analytics.pnl_engine import (
    compute_metrics,
    compute_trade_pnl,
    generate_insights,
    sort_trades_chronologically,
    summarize_trades,
)

__all__ = [
    # Models
    "Trade",
    "Direction",
    "AdvancedMetrics",
    "TradeSummary",
    "TradeCalculation",
    "PatternInsight",
    # Engine
    "compute_trade_pnl",
    "compute_metrics",
    "generate_insights",
    "summarize_trades",
    "sort_trades_chronologically",
    # Calculations
    "calculate_fees",
    "calculate_trade",
    "calculate_trade_for",
    # Patterns
    "detect_patterns",
]
