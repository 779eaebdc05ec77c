"""
Limits Command - Show the budgets applied to trace links.
"""

import click
from rich.console import Console
from rich.table import Table

from ... import config

console = Console()


@click.command()
def limits() -> None:
    """
    Show the count and length budgets applied to trace links.
    """
    table = Table(title="Trace Link Budgets")
    table.add_column("Name", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Meaning", style="dim")

    table.add_row("MAX_LINKED_TRACES", str(config.MAX_LINKED_TRACES), "Most trace IDs per link")
    table.add_row("MAX_LENGTH", str(config.MAX_LENGTH), "Longest URL, in characters")
    table.add_row("MIN_LENGTH", str(config.MIN_LENGTH), "Search URL length before trace IDs")
    table.add_row("PARAM_NAME_LENGTH", str(config.PARAM_NAME_LENGTH), "Overhead per trace ID")
    table.add_row(
        "HOVER_DEBOUNCE_SECONDS", f"{config.HOVER_DEBOUNCE_SECONDS:g}", "Delay before un-hover"
    )

    console.print(table)
