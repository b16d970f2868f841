"""
parser_core.py
File-level parsing engine with logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from family_chart.config import get_config
from family_chart.core.exceptions import ChartLoadError
from family_chart.loader.diagnostics import ParseDiagnostics
from family_chart.loader.tree_builder import parse_family_tree_with_diagnostics
from family_chart.logging import get_logger
from family_chart.models import FamilyData


class FamilyChartParser:
    """
    High-level parser:
      - reads chart text from disk
      - builds the FamilyData graph
      - keeps the diagnostics of the last parse
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")
        self.encoding = self.cfg.parser.get("encoding", "utf-8")

        self.text: str = ""
        self.family_data: Optional[FamilyData] = None
        self.diagnostics: ParseDiagnostics = ParseDiagnostics()

    # ---------------------------------------------------------
    # Load file
    # ---------------------------------------------------------
    def load_file(self, path: Union[str, Path]) -> str:
        """Read chart text from ``path``. Raises ChartLoadError."""
        file_path = Path(path)
        self.log.info("Reading chart: %s", file_path)

        if not file_path.is_file():
            raise ChartLoadError(f"Chart file not found: {file_path}")

        try:
            text = file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            self.log.exception("Reading chart failed.")
            raise ChartLoadError(f"Cannot read chart {file_path}: {exc}") from exc

        # Strip a UTF-8 BOM left by some editors.
        self.text = text.lstrip("\ufeff")
        return self.text

    # ---------------------------------------------------------
    # Parse
    # ---------------------------------------------------------
    def parse_text(self, text: str) -> FamilyData:
        self.family_data, self.diagnostics = parse_family_tree_with_diagnostics(text)

        self.log.info(
            "Parsed chart: persons=%d spouses=%d root=%s",
            len(self.family_data),
            self.family_data.spouse_count(),
            self.family_data.root_id or "-",
        )
        if self.diagnostics.entries:
            self.log.info("Parse diagnostics: %s", self.diagnostics.counts())
        if self.cfg.debug:
            for entry in self.diagnostics:
                self.log.debug("line %d [%s] %s", entry.lineno, entry.kind.value, entry.message)

        return self.family_data

    def run(self, input_path: Union[str, Path]) -> FamilyData:
        """
        Full parse sequence.
        Returns: FamilyData
        """
        text = self.load_file(input_path)
        return self.parse_text(text)
