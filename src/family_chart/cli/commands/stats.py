from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from family_chart.cli.utils import console, load_chart
from family_chart.graph import generation_counts


def stats_command(
    chart: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a chart file.
    """
    data, diag = load_chart(chart, verbose=verbose)

    table = Table(title="Chart Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Persons", str(len(data)))
    table.add_row("Spouses", str(data.spouse_count()))
    for generation, count in generation_counts(data).items():
        table.add_row(f"Generation {generation}", str(count))

    console.print(table)

    root = data.root
    console.print(f"Root: {root.name} ({root.id})" if root else "Root: -")

    counts = diag.counts()
    if counts:
        diag_table = Table(title="Diagnostics")
        diag_table.add_column("Kind", style="bold")
        diag_table.add_column("Count", justify="right")
        for kind, count in sorted(counts.items()):
            diag_table.add_row(kind, str(count))
        console.print(diag_table)
