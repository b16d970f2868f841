from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from family_chart.cli.utils import console, load_chart
from family_chart.graph import path_to_root
from family_chart.search import DEFAULT_LIMIT, search_persons


def search_command(
    chart: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    query: str = typer.Argument(..., help="Text to match, or /regex/flags"),
    limit: int = typer.Option(DEFAULT_LIMIT, "--limit", "-n", min=1, help="Maximum results"),
):
    """
    Search persons by name, localized name, alias, or house name.
    """
    data, _ = load_chart(chart)
    results = search_persons(data, query, limit=limit)

    if not results:
        console.print("No matches.")
        return

    table = Table(title=f"Matches for {query!r}")
    table.add_column("Id")
    table.add_column("Name", style="bold")
    table.add_column("Gen", justify="right")
    table.add_column("Matched")
    table.add_column("Score", justify="right")
    table.add_column("Lineage")

    for result in results:
        person = result.person
        lineage = " < ".join(
            data.all_persons[pid].name for pid in path_to_root(data, person.id)[1:]
        )
        table.add_row(
            person.id,
            person.name,
            str(person.generation),
            f"{result.field}: {result.matched}",
            f"{result.score:.2f}",
            lineage,
        )

    console.print(table)
