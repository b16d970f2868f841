# src/family_chart/loader/classifier.py

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Pattern, Tuple


class RecordKind(str, Enum):
    PERSON = "person"
    SPOUSE = "spouse"
    METADATA = "metadata"
    IGNORED = "ignored"


class MetadataField(str, Enum):
    ALIAS = "alias"
    HOUSE_NAME = "house_name"
    NAME_VN = "name_vn"
    MEMORIAL_DATE = "memorial_date"
    RELIGIOUS_NAME = "religious_name"
    MARRIAGE = "marriage"
    DIVORCE = "divorce"


@dataclass(frozen=True)
class Record:
    """
    A classified chart line.

    Attributes:
        kind: Which of the four record shapes the line matched.
        lineno: 1-based line number in the source text.
        raw: The normalized line that was classified.
        generation: Generation number (PERSON only).
        index: Sibling index as written, e.g. "5" or "5a" (PERSON only).
        text: Free text after the marker (PERSON and SPOUSE).
        field: Which labelled prefix matched (METADATA only).
        value: Trimmed value after the prefix, possibly "" (METADATA only).
    """

    kind: RecordKind
    lineno: int = 0
    raw: str = ""
    generation: Optional[int] = None
    index: Optional[str] = None
    text: Optional[str] = None
    field: Optional[MetadataField] = None
    value: Optional[str] = None


PERSON_RE = re.compile(r"^\(([0-9]+)\)\s*([0-9]+[a-z]?)\s+(.+)$")
SPOUSE_RE = re.compile(r"^&\s+(.+)$")

# Order matters: the first matching prefix wins.
METADATA_PATTERNS: Tuple[Tuple[MetadataField, Pattern[str]], ...] = (
    (MetadataField.ALIAS, re.compile(r"^ali\.\s*(.+)$")),
    (MetadataField.HOUSE_NAME, re.compile(r"^TênNhà\.\s*(.+)$")),
    (MetadataField.NAME_VN, re.compile(r"^TênVN\.\s*(.+)$")),
    (MetadataField.MEMORIAL_DATE, re.compile(r"^NgàyKỵ\.\s*(.+)$")),
    (MetadataField.RELIGIOUS_NAME, re.compile(r"^PhápNm\.\s*(.+)$")),
    (MetadataField.MARRIAGE, re.compile(r"^m\.\s*(.*)$")),
    (MetadataField.DIVORCE, re.compile(r"^div\.\s*(.*)$")),
)


def classify_line(line: str, lineno: int = 0) -> Record:
    """
    Classify a normalized chart line.

    Person lines are tested first, then spouse lines, then the metadata
    prefixes in table order. Anything else is IGNORED.

    Examples:
        "(3) 5a Nguyễn Văn A (1920-1995)"  -> PERSON
        "& Trần Thị B"                      -> SPOUSE
        "m. Jan 1945"                       -> METADATA (MARRIAGE)
    """
    match = PERSON_RE.match(line)
    if match:
        return Record(
            kind=RecordKind.PERSON,
            lineno=lineno,
            raw=line,
            generation=int(match.group(1)),
            index=match.group(2),
            text=match.group(3),
        )

    match = SPOUSE_RE.match(line)
    if match:
        return Record(
            kind=RecordKind.SPOUSE,
            lineno=lineno,
            raw=line,
            text=match.group(1),
        )

    for field_kind, pattern in METADATA_PATTERNS:
        match = pattern.match(line)
        if match:
            return Record(
                kind=RecordKind.METADATA,
                lineno=lineno,
                raw=line,
                field=field_kind,
                value=(match.group(1) or "").strip(),
            )

    return Record(kind=RecordKind.IGNORED, lineno=lineno, raw=line)
