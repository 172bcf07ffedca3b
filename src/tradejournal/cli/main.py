"""tradejournal CLI main entry point."""

import click

from tradejournal import __version__
from tradejournal.cli.commands import analyze_command, calc_command, export_command, insights_command


@click.group()
@click.version_option(version=__version__)
def main():
    """tradejournal - Trading Journal Performance Analytics"""
    pass


main.add_command(analyze_command)
main.add_command(insights_command)
main.add_command(export_command)
main.add_command(calc_command)


if __name__ == "__main__":
    main()
