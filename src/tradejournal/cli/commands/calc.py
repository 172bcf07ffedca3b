"""Trade entry calculator command."""

import sys
from decimal import Decimal
from typing import Optional

import click
from rich.console import Console

from tradejournal.analytics.calculations import calculate_trade
from tradejournal.cli.commands.common import configure_logging
from tradejournal.cli.ui.formatters import create_calculation_table


class DecimalParamType(click.ParamType):
    """Click parameter parsed as a positive Decimal."""

    name = "decimal"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            result = Decimal(str(value))
        except ArithmeticError:
            self.fail(f"{value!r} is not a valid number", param, ctx)
        if not result.is_finite() or result < 0:
            self.fail(f"{value!r} must be a non-negative number", param, ctx)
        return result


DECIMAL = DecimalParamType()

console = Console()


@click.command("calc")
@click.option("--entry", "entry_price", type=DECIMAL, required=True, help="Entry price")
@click.option("--quantity", "-q", type=DECIMAL, required=True, help="Position size")
@click.option(
    "--direction",
    "-d",
    type=click.Choice(["long", "short"], case_sensitive=False),
    default="long",
    show_default=True,
)
@click.option("--exit", "exit_price", type=DECIMAL, help="Exit price")
@click.option("--stop", "stop_loss", type=DECIMAL, help="Stop-loss level")
@click.option("--target", "take_profit", type=DECIMAL, help="Take-profit level")
@click.option("--fee-rate", type=DECIMAL, help="Fee per side as a fraction of notional (default from config)")
def calc_command(
    entry_price: Decimal,
    quantity: Decimal,
    direction: str,
    exit_price: Optional[Decimal],
    stop_loss: Optional[Decimal],
    take_profit: Optional[Decimal],
    fee_rate: Optional[Decimal],
):
    """
    Calculate P&L after fees, ROI and risk/reward for a trade.

    \b
    Examples:
        tradejournal calc --entry 100 -q 10 --exit 110
        tradejournal calc --entry 50 -q 20 -d short --stop 52 --target 44
    """
    system_config = configure_logging(None)
    if fee_rate is None:
        fee_rate = system_config.analytics.fee_rate

    calculation = calculate_trade(
        entry_price=entry_price,
        quantity=quantity,
        direction=direction.lower(),
        exit_price=exit_price,
        stop_loss=stop_loss,
        take_profit=take_profit,
        fee_rate=fee_rate,
    )
    if calculation is None:
        console.print("[bold red]✗ Entry price and quantity must be non-zero[/bold red]")
        sys.exit(1)

    console.print(create_calculation_table(calculation))
