"""Commands __init__ - exports all commands."""

from tradejournal.cli.commands.analyze import analyze_command
from tradejournal.cli.commands.calc import calc_command
from tradejournal.cli.commands.export import export_command
from tradejournal.cli.commands.insights import insights_command

__all__ = ["analyze_command", "calc_command", "export_command", "insights_command"]
