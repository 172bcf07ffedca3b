"""CSV export command."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from tradejournal.cli.commands.common import configure_logging, load_journal
from tradejournal.data.exporter import export_performance_report, export_trades_csv
from tradejournal.data.loader import TradeLoadError

console = Console()


@click.command("export")
@click.argument("trades_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for exported files (default from config)",
)
@click.option(
    "--report/--no-report",
    default=True,
    help="Also write the performance report",
)
@click.option(
    "--chronological/--as-given",
    default=None,
    help="Sort trades by open time before exporting (default from config)",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Set logging level",
)
def export_command(
    trades_file: Path,
    output_dir: Optional[Path],
    report: bool,
    chronological: Optional[bool],
    log_level: Optional[str],
):
    """
    Export trades and the performance report as CSV.

    \b
    Examples:
        tradejournal export trades.json
        tradejournal export trades.json -o reports/ --no-report
    """
    try:
        system_config = configure_logging(log_level)
        export_config = system_config.export
        if chronological is None:
            chronological = system_config.analytics.chronological
        if output_dir is None:
            output_dir = Path(export_config.default_output_dir)

        trades = load_journal(trades_file, chronological)

        trades_path = export_trades_csv(
            trades,
            output_dir / export_config.trades_filename,
            date_format=export_config.date_format,
        )
        console.print(f"[green]✓[/green] Trades:  {trades_path} ({len(trades)} rows)")

        if report:
            report_path = export_performance_report(trades, output_dir / export_config.report_filename)
            console.print(f"[green]✓[/green] Report:  {report_path}")

    except (TradeLoadError, OSError) as e:
        console.print(f"[bold red]✗ Export failed:[/bold red] {e}")
        sys.exit(1)
