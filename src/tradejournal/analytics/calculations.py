"""Trade entry calculations.

Live numbers shown while a trade is entered or reviewed: gross and net
P&L after fees, return on entry notional, and the risk/reward implied by
stop-loss and take-profit levels.

Fees are charged on both sides as a fraction of notional:
    fees = (entry x qty + exit x qty) x fee_rate
"""

from decimal import Decimal

from tradejournal.analytics.models import Direction, Trade, TradeCalculation

DEFAULT_FEE_RATE = Decimal("0.001")  # 0.1% per side


def calculate_fees(
    entry_price: Decimal,
    quantity: Decimal,
    exit_price: Decimal | None = None,
    fee_rate: Decimal = DEFAULT_FEE_RATE,
) -> Decimal:
    """
    Calculate round-trip fees.

    Args:
        entry_price: Entry price per unit
        quantity: Position size
        exit_price: Exit price per unit (no exit fee if None)
        fee_rate: Fee per side as a fraction of notional

    Returns:
        Total fees in currency units

    Example:
        >>> calculate_fees(Decimal("100"), Decimal("10"), Decimal("110"))
        Decimal('2.100')
    """
    entry_fee = entry_price * quantity * fee_rate
    exit_fee = (exit_price or Decimal("0")) * quantity * fee_rate
    return entry_fee + exit_fee


def calculate_trade(
    entry_price: Decimal | None,
    quantity: Decimal | None,
    direction: Direction | str = Direction.LONG,
    exit_price: Decimal | None = None,
    stop_loss: Decimal | None = None,
    take_profit: Decimal | None = None,
    fee_rate: Decimal = DEFAULT_FEE_RATE,
) -> TradeCalculation | None:
    """
    Calculate P&L, ROI and risk/reward for a trade being entered.

    Args:
        entry_price: Entry price (required)
        quantity: Position size (required)
        direction: "long" or "short"
        exit_price: Exit price; realized figures stay zero without it
        stop_loss: Stop level, used for potential loss
        take_profit: Target level, used for potential gain
        fee_rate: Fee per side as a fraction of notional

    Returns:
        TradeCalculation, or None when entry price or quantity is missing

    Example:
        >>> calc = calculate_trade(Decimal("100"), Decimal("10"), "long", exit_price=Decimal("110"))
        >>> calc.net_pnl
        Decimal('97.900')
    """
    if not entry_price or not quantity:
        return None

    multiplier = Direction(direction).multiplier

    gross_pnl = Decimal("0")
    fees = Decimal("0")
    net_pnl = Decimal("0")
    roi = Decimal("0")

    if exit_price:
        gross_pnl = (exit_price - entry_price) * quantity * multiplier
        fees = calculate_fees(entry_price, quantity, exit_price, fee_rate)
        net_pnl = gross_pnl - fees
        roi = net_pnl / (entry_price * quantity) * 100

    potential_loss = None
    if stop_loss:
        potential_loss = abs((stop_loss - entry_price) * quantity * multiplier)

    potential_gain = None
    if take_profit:
        potential_gain = (take_profit - entry_price) * quantity * multiplier

    risk_reward = None
    if potential_loss and potential_gain:
        risk_reward = potential_gain / potential_loss

    return TradeCalculation(
        gross_pnl=gross_pnl,
        fees=fees,
        net_pnl=net_pnl,
        roi=roi,
        potential_loss=potential_loss,
        potential_gain=potential_gain,
        risk_reward=risk_reward,
    )


def calculate_trade_for(
    trade: Trade,
    stop_loss: Decimal | None = None,
    take_profit: Decimal | None = None,
    fee_rate: Decimal = DEFAULT_FEE_RATE,
) -> TradeCalculation | None:
    """Run calculate_trade() over a journaled Trade."""
    return calculate_trade(
        entry_price=trade.entry_price,
        quantity=trade.quantity,
        direction=trade.direction,
        exit_price=trade.exit_price,
        stop_loss=stop_loss,
        take_profit=take_profit,
        fee_rate=fee_rate,
    )
