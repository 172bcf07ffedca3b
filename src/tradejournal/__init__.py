"""
tradejournal - Trading Journal Analytics

Public API for computing realized P&L, risk and distribution statistics
over a list of journaled trades.
"""

from importlib.metadata import version

try:
    __version__ = version("tradejournal")
except Exception:
    __version__ = "0.0.0.dev"  # Fallback for development


__all__ = [
    "__version__",
]
