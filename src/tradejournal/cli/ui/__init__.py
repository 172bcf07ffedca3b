"""CLI UI components - Rich formatters."""

from tradejournal.cli.ui.formatters import (
    create_calculation_table,
    create_insights_panel,
    create_metrics_table,
    create_summary_table,
)

__all__ = [
    "create_summary_table",
    "create_metrics_table",
    "create_insights_panel",
    "create_calculation_table",
]
