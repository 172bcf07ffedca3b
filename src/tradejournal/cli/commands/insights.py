"""Insights command: threshold insights plus behavioral patterns."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from tradejournal.analytics.patterns import detect_patterns
from tradejournal.analytics.pnl_engine import generate_insights, sort_trades_chronologically
from tradejournal.cli.commands.common import configure_logging, load_journal
from tradejournal.cli.ui.formatters import create_insights_panel
from tradejournal.data.loader import TradeLoadError

console = Console()


@click.command("insights")
@click.argument("trades_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--chronological/--as-given",
    default=None,
    help="Sort trades by open time before computing metric insights (default from config)",
)
@click.option(
    "--min-trades",
    type=click.IntRange(min=1),
    help="Minimum journal size for pattern detection (default from config)",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Set logging level",
)
def insights_command(
    trades_file: Path,
    chronological: Optional[bool],
    min_trades: Optional[int],
    log_level: Optional[str],
):
    """
    List insights and behavioral patterns for a trade journal.

    Pattern detection reads the journal most recent first, as exported.

    \b
    Examples:
        tradejournal insights trades.csv
        tradejournal insights trades.csv --min-trades 20
    """
    try:
        system_config = configure_logging(log_level)
        if chronological is None:
            chronological = system_config.analytics.chronological
        if min_trades is None:
            min_trades = system_config.analytics.min_trades_for_patterns

        trades = load_journal(trades_file, chronological=False)
        metric_trades = sort_trades_chronologically(trades) if chronological else trades

        panel = create_insights_panel(
            generate_insights(metric_trades),
            detect_patterns(trades, min_trades=min_trades),
        )
        console.print(panel)

    except TradeLoadError as e:
        console.print(f"[bold red]✗ Could not load trades:[/bold red] {e}")
        sys.exit(1)
