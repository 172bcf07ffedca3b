"""Journal analysis command."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.columns import Columns
from rich.console import Console

from tradejournal.analytics.pnl_engine import compute_metrics, generate_insights, summarize_trades
from tradejournal.cli.commands.common import configure_logging, load_journal
from tradejournal.cli.ui.formatters import create_insights_panel, create_metrics_table, create_summary_table
from tradejournal.data.loader import TradeLoadError

console = Console()


@click.command("analyze")
@click.argument("trades_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--chronological/--as-given",
    default=None,
    help="Sort trades by open time before computing streaks and drawdown (default from config)",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Set logging level",
)
def analyze_command(trades_file: Path, chronological: Optional[bool], log_level: Optional[str]):
    """
    Show summary, advanced metrics and insights for a trade journal.

    TRADES_FILE is a CSV, JSON or YAML journal export.

    \b
    Examples:
        tradejournal analyze trades.csv
        tradejournal analyze trades.json --chronological
    """
    try:
        system_config = configure_logging(log_level)
        if chronological is None:
            chronological = system_config.analytics.chronological

        trades = load_journal(trades_file, chronological)

        console.rule("[bold blue]Trade Journal Analysis[/bold blue]")
        console.print()
        console.print(
            Columns(
                [
                    create_summary_table(summarize_trades(trades)),
                    create_metrics_table(compute_metrics(trades)),
                ],
                padding=(0, 4),
            )
        )
        console.print()
        console.print(create_insights_panel(generate_insights(trades)))
        console.print(f"[dim]Order: {'chronological' if chronological else 'as given'}[/dim]")

    except TradeLoadError as e:
        console.print(f"[bold red]✗ Could not load trades:[/bold red] {e}")
        sys.exit(1)
