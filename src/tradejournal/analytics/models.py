"""Trade journal data models.

Pydantic models for journaled trades and the analytics computed from them.
Metric models are immutable value objects, recomputed on every call.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Direction(str, Enum):
    """Trade direction."""

    LONG = "long"
    SHORT = "short"

    @property
    def multiplier(self) -> int:
        """+1 for long, -1 for short."""
        return 1 if self is Direction.LONG else -1


class Trade(BaseModel):
    """
    A journaled trade.

    A trade without ``exit_price`` is an open position: it has no realized
    P&L and is excluded from every closed-trade statistic. Descriptive fields
    (symbol, tags, emotional state, notes...) are carried through untouched.
    """

    model_config = ConfigDict(frozen=True)

    direction: Direction
    entry_price: Decimal = Field(gt=0)
    exit_price: Decimal | None = Field(default=None, gt=0)
    quantity: Decimal = Field(gt=0)
    created_at: datetime

    id: str | None = None
    symbol: str = ""
    tags: list[str] = Field(default_factory=list)
    emotional_state: str | None = None
    notes: str | None = None
    screenshot_url: str | None = None
    updated_at: datetime | None = None
    execution_quality: Literal["excellent", "good", "fair", "poor"] | None = None
    slippage: Decimal | None = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamp(cls, v: datetime | None) -> datetime | None:
        """Store timestamps as naive UTC; offset-aware values are converted."""
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @property
    def is_closed(self) -> bool:
        """Exit price recorded."""
        return self.exit_price is not None

    @property
    def is_open(self) -> bool:
        """Position still open."""
        return self.exit_price is None

    @property
    def notional(self) -> Decimal:
        """Position size at entry (entry price x quantity)."""
        return self.entry_price * self.quantity


class AdvancedMetrics(BaseModel):
    """
    Risk and distribution statistics over the closed trades of a journal.

    All ratios are computed per trade (not per period) with a zero
    risk-free rate. ``average_loss`` is a positive magnitude, like
    ``average_win``. ``profit_factor`` is ``inf`` when there are wins and
    no losses.
    """

    model_config = ConfigDict(frozen=True)

    sharpe_ratio: float = 0.0
    sortino: float = 0.0
    max_drawdown: float = 0.0  # Percentage of the cumulative P&L peak
    win_streak: int = 0
    loss_streak: int = 0
    profit_factor: float = 0.0
    average_win: float = 0.0
    average_loss: float = 0.0
    expectancy: float = 0.0
    volatility: float = 0.0


class TradeSummary(BaseModel):
    """Headline counts and totals shown on dashboards and report summaries."""

    model_config = ConfigDict(frozen=True)

    total_trades: int = 0
    closed_trades: int = 0
    open_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    total_pnl: Decimal = Decimal("0")
    win_rate: float = 0.0  # Percent of closed trades
    average_pnl: float = 0.0  # Per closed trade


class TradeCalculation(BaseModel):
    """Live calculations for a trade being entered or reviewed."""

    model_config = ConfigDict(frozen=True)

    gross_pnl: Decimal = Decimal("0")
    fees: Decimal = Decimal("0")
    net_pnl: Decimal = Decimal("0")
    roi: Decimal = Decimal("0")  # Percent of entry notional
    potential_loss: Decimal | None = None
    potential_gain: Decimal | None = None
    risk_reward: Decimal | None = None


InsightType = Literal["pattern", "risk-warning", "opportunity"]


class PatternInsight(BaseModel):
    """A behavioral observation mined from the journal."""

    model_config = ConfigDict(frozen=True)

    insight_type: InsightType
    confidence: float = Field(ge=0, le=1)
    title: str
    description: str
    data: dict[str, Any] = Field(default_factory=dict)
