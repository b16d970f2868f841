# src/family_chart/loader/__init__.py

"""
Public interface for the chart loader stack.

Intended usage from other parts of the project and tests:

    from family_chart.loader import (
        normalize_line,
        classify_line,
        parse_years,
        extract_name,
        parse_family_tree,
        parse_family_tree_with_diagnostics,
    )
"""

from __future__ import annotations

from .classifier import MetadataField, Record, RecordKind, classify_line
from .diagnostics import Diagnostic, DiagnosticKind, ParseDiagnostics
from .extraction import YearRange, extract_name, normalize_name_key, parse_years
from .normalizer import normalize_line, split_lines, strip_provenance
from .tree_builder import (
    ParserState,
    build_family_tree,
    parse_family_tree,
    parse_family_tree_with_diagnostics,
)


__all__ = [
    "MetadataField",
    "Record",
    "RecordKind",
    "classify_line",
    "Diagnostic",
    "DiagnosticKind",
    "ParseDiagnostics",
    "YearRange",
    "extract_name",
    "normalize_name_key",
    "parse_years",
    "normalize_line",
    "split_lines",
    "strip_provenance",
    "ParserState",
    "build_family_tree",
    "parse_family_tree",
    "parse_family_tree_with_diagnostics",
]
