from __future__ import annotations

from pathlib import Path

import pytest

from family_chart.core.exceptions import ChartLoadError
from family_chart.parser_core import FamilyChartParser


def test_mock_file_exists(sample_chart_path: Path) -> None:
    assert sample_chart_path.is_file(), f"Expected chart file at: {sample_chart_path}"


def test_run_parses_mock_chart(sample_chart_path: Path) -> None:
    parser = FamilyChartParser()
    data = parser.run(sample_chart_path)

    assert data.root is not None
    assert data.root.name == "Nguyễn Văn Giao"
    assert parser.family_data is data
    assert parser.diagnostics.counts()["merged_record"] == 1


def test_missing_file_raises_chart_load_error(tmp_path: Path) -> None:
    with pytest.raises(ChartLoadError):
        FamilyChartParser().run(tmp_path / "nope.txt")


def test_undecodable_file_raises_chart_load_error(tmp_path: Path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"(1) 1 \xff\xfe\xfa")
    with pytest.raises(ChartLoadError):
        FamilyChartParser().run(bad)


def test_bom_is_stripped(tmp_path: Path) -> None:
    chart = tmp_path / "bom.txt"
    chart.write_bytes("\ufeff(1) 1 Ann\n& Carol".encode("utf-8"))

    data = FamilyChartParser().run(chart)
    assert data.root_id == "root_g1-1"
    assert data.root.spouses[0].name == "Carol"
