"""
CLI command modules for family_chart.

Each command module defines a single Typer-compatible command function.
"""

from family_chart.cli.commands.export import export_command
from family_chart.cli.commands.search import search_command
from family_chart.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "search_command",
    "stats_command",
]
