"""Shared option handling for CLI commands."""

from dataclasses import replace
from pathlib import Path
from typing import Literal, Optional, cast

from tradejournal.analytics.models import Trade
from tradejournal.analytics.pnl_engine import sort_trades_chronologically
from tradejournal.data.loader import load_trades
from tradejournal.system import LoggerFactory, SystemConfig, get_system_config


def configure_logging(log_level: Optional[str]) -> SystemConfig:
    """Configure logging from the system config, applying a CLI level override."""
    system_config = get_system_config()
    logging_config = system_config.logging
    if log_level:
        # click already validated the choice
        level = cast(Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], log_level.upper())
        logging_config = replace(logging_config, level=level)
    LoggerFactory.configure(logging_config.to_logger_config())
    return system_config


def load_journal(path: Path, chronological: bool) -> list[Trade]:
    """Load trades, optionally sorted ascending by created_at."""
    trades = load_trades(path)
    if chronological:
        trades = sort_trades_chronologically(trades)
    return trades
