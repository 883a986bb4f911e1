"""
Rich rendering of parsed commands and expectation sets.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ipsh_lib.commands import Command
from ipsh_lib.executor import command_line
from ipsh_lib.parser.context import ParseContext


def command_table(command: Command) -> Table:
    """Field/value table for a parsed command."""
    table = Table(title=escape(command_line(command)), show_header=True, header_style="bold")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("subcommand", command.keyword)
    for name, value in command.describe().items():
        table.add_row(name, escape(value))
    return table


def expectation_table(ctx: ParseContext) -> Table:
    """What the grammar accepts at the context's cursor."""
    consumed = " ".join(ctx.stream.consumed()) or "(nothing)"
    table = Table(title=escape(f"after: {consumed}"), show_header=True, header_style="bold")
    table.add_column("Accepts")
    table.add_column("Kind", style="dim")
    for keyword in ctx.keywords:
        table.add_row(escape(keyword), "keyword")
    for placeholder in ctx.placeholders:
        table.add_row(escape(placeholder), "value")
    return table


def print_command(command: Command, console: Optional[Console] = None) -> None:
    (console or Console()).print(command_table(command))
