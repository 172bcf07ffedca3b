"""Journal data access: loading trade files and writing CSV exports."""

from tradejournal.data.exporter import export_performance_report, export_trades_csv
from tradejournal.data.loader import TradeLoadError, load_trades, parse_trade

__all__ = [
    "TradeLoadError",
    "load_trades",
    "parse_trade",
    "export_trades_csv",
    "export_performance_report",
]
