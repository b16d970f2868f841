from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_chart.cli.utils import err_console, load_chart, write_json
from family_chart.exporter import diagnostics_to_list, family_data_to_dict


def export_command(
    chart: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    diagnostics: bool = typer.Option(
        False,
        "--diagnostics",
        help="Include parse diagnostics under a 'diagnostics' key",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export a parsed chart to JSON (stdout by default).
    """
    data, diag = load_chart(chart, verbose=verbose)

    payload = family_data_to_dict(data)
    if diagnostics:
        payload["diagnostics"] = diagnostics_to_list(diag)

    write_json(payload, out=out, pretty=pretty)

    if verbose:
        err_console.log("Export complete")
