# src/family_chart/loader/diagnostics.py

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List


class DiagnosticKind(str, Enum):
    SKIPPED_HEADER = "skipped_header"
    STRIPPED_PROVENANCE = "stripped_provenance"
    UNRECOGNIZED = "unrecognized"
    MERGED_RECORD = "merged_record"
    SLOT_COLLISION = "slot_collision"
    UNATTACHED_CHILD = "unattached_child"
    NO_FOCUS_PERSON = "no_focus_person"
    NO_FOCUS_SPOUSE = "no_focus_spouse"


@dataclass(frozen=True)
class Diagnostic:
    lineno: int
    kind: DiagnosticKind
    message: str
    line: str = ""


@dataclass
class ParseDiagnostics:
    """
    Non-fatal notes gathered during one parse.

    Kept apart from FamilyData so the parse result shape never changes.
    """

    entries: List[Diagnostic] = field(default_factory=list)

    def add(self, lineno: int, kind: DiagnosticKind, message: str, line: str = "") -> Diagnostic:
        entry = Diagnostic(lineno=lineno, kind=kind, message=message, line=line)
        self.entries.append(entry)
        return entry

    def by_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.entries if d.kind == kind]

    def counts(self) -> Dict[str, int]:
        return dict(Counter(d.kind.value for d in self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)
