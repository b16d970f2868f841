
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Tuple

import typer
from rich.console import Console

from family_chart.core.exceptions import ChartLoadError
from family_chart.loader.diagnostics import ParseDiagnostics
from family_chart.models import FamilyData
from family_chart.parser_core import FamilyChartParser

console = Console()
err_console = Console(stderr=True)


def load_chart(path: Path, *, verbose: bool = False) -> Tuple[FamilyData, ParseDiagnostics]:
    """
    Read and parse a chart file for a CLI command.

    Load failures are reported and turned into exit code 1.
    """
    t0 = time.perf_counter()

    parser = FamilyChartParser()
    try:
        data = parser.run(path)
    except ChartLoadError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        err_console.log(f"Parsed {len(data)} persons in {elapsed:.2f}s")

    return data, parser.diagnostics


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        typer.echo(payload)
