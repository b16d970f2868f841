
from __future__ import annotations

import typer

from family_chart.cli.commands.export import export_command
from family_chart.cli.commands.search import search_command
from family_chart.cli.commands.stats import stats_command

app = typer.Typer(
    name="family-chart",
    help="Descendant chart parser, inspector, and exporter",
    add_completion=False,
)

app.command("export")(export_command)
app.command("stats")(stats_command)
app.command("search")(search_command)


def main():
    app()


if __name__ == "__main__":
    main()
