"""
json_exporter.py
Structured JSON exporter for FamilyData.

This exporter:
- Converts dataclasses into dictionaries keyed the way tree consumers read
  them (allPersons, rootId, childrenIds, nameVN, ...)
- Omits optional fields that were never set
- Is deterministic: same graph, same bytes
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, List

from family_chart.loader.diagnostics import ParseDiagnostics
from family_chart.logging import get_logger
from family_chart.models import FamilyData

log = get_logger("json_exporter")

# Python attribute -> consumer-facing key, where they differ.
_KEY_OVERRIDES = {
    "name_vn": "nameVN",
}


def _camel_key(name: str) -> str:
    if name in _KEY_OVERRIDES:
        return _KEY_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dataclasses → dict with camelCase keys, None values dropped
    - dict → dict (recursively)
    - list / tuple / set → list (recursively)
    - Anything else → str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj):
        out: Dict[str, Any] = {}
        for f in fields(obj):
            value = getattr(obj, f.name)
            if value is None:
                continue
            out[_camel_key(f.name)] = _to_json_compatible(value)
        return out

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def family_data_to_dict(data: FamilyData) -> Dict[str, Any]:
    """
    Convert FamilyData into a JSON-safe dict:

        {"allPersons": {id: {...}}, "rootId": "..."}
    """
    return {
        "allPersons": {
            person_id: _to_json_compatible(person)
            for person_id, person in data.all_persons.items()
        },
        "rootId": data.root_id,
    }


def diagnostics_to_list(diagnostics: ParseDiagnostics) -> List[Dict[str, Any]]:
    return [
        {
            "lineno": d.lineno,
            "kind": d.kind.value,
            "message": d.message,
            "line": d.line,
        }
        for d in diagnostics
    ]


def serialize_family_data(data: FamilyData, indent: int | None = 2) -> str:
    return json.dumps(
        family_data_to_dict(data),
        indent=indent,
        ensure_ascii=False,
    )


def export_family_json(data: FamilyData, output_path: str | Path, indent: int = 2) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting family JSON to: %s (persons=%d, spouses=%d)",
        output_path,
        len(data),
        data.spouse_count(),
    )

    json_str = serialize_family_data(data, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
    return output_path
