"""
Exporter package.

Re-exports the JSON export entry points used by the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    diagnostics_to_list,
    export_family_json,
    family_data_to_dict,
    serialize_family_data,
)

__all__ = [
    "diagnostics_to_list",
    "export_family_json",
    "family_data_to_dict",
    "serialize_family_data",
]
