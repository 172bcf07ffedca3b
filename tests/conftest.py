"""Root conftest - shared trade factories."""

from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path

import pytest

from tradejournal.analytics.models import Trade

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_TIME = datetime(2025, 3, 3, 9, 30)


def build_trade(
    direction: str = "long",
    entry: float | str = 100,
    exit: float | str | None = 110,
    quantity: float | str = 1,
    created_at: datetime | None = None,
    **fields,
) -> Trade:
    """Build a Trade from plain numbers (converted via str to keep Decimal exact)."""
    return Trade(
        direction=direction,
        entry_price=Decimal(str(entry)),
        exit_price=None if exit is None else Decimal(str(exit)),
        quantity=Decimal(str(quantity)),
        created_at=created_at or BASE_TIME,
        **fields,
    )


def trades_from_pnls(pnls: list[float | int], start: datetime = BASE_TIME) -> list[Trade]:
    """One long trade per P&L value (entry 1000, quantity 1), an hour apart."""
    return [
        build_trade(
            entry=1000,
            exit=Decimal("1000") + Decimal(str(pnl)),
            quantity=1,
            created_at=start + timedelta(hours=i),
        )
        for i, pnl in enumerate(pnls)
    ]


@pytest.fixture
def make_trade():
    """Fixture providing the build_trade factory."""
    return build_trade


@pytest.fixture
def sample_trades():
    """Mixed journal: two wins, one loss, one open position."""
    return [
        build_trade("long", 100, 110, 10, BASE_TIME, symbol="AAPL"),
        build_trade("short", 50, 45, 20, BASE_TIME + timedelta(days=1), symbol="TSLA"),
        build_trade("long", 100, 90, 1, BASE_TIME + timedelta(days=2), symbol="AAPL"),
        build_trade("long", 200, None, 5, BASE_TIME + timedelta(days=3), symbol="MSFT"),
    ]


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to static test fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def pnl_trades():
    """Fixture providing the trades_from_pnls factory."""
    return trades_from_pnls
