# src/family_chart/loader/normalizer.py

from __future__ import annotations

import re
from typing import List, Optional

# Chart exports sometimes glue a "Created: <weekday>, <date>" stamp onto the
# front of a data line, e.g. "Created: Saturday, 28 Dec 2024(3) 3b ...".
PROVENANCE_RE = re.compile(r"^(Created:.*?[0-9]{4})(.*)$")

SECTION_HEADER_MARKERS = ("Descendant Chart",)

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    """Split chart text on LF or CRLF line endings."""
    return _LINE_SPLIT_RE.split(text)


def strip_provenance(line: str) -> str:
    """
    Remove a leading provenance stamp up to and including its 4-digit year.

    Lines without a stamp are returned unchanged.
    """
    match = PROVENANCE_RE.match(line)
    if match:
        return match.group(2)
    return line


def is_section_header(line: str) -> bool:
    return any(marker in line for marker in SECTION_HEADER_MARKERS)


def normalize_line(raw: str) -> Optional[str]:
    """
    Normalize one raw chart line.

    Returns the cleaned line, or None when the line carries no data (blank
    after cleaning, or a section header).
    """
    line = strip_provenance(raw.strip()).strip()

    if not line or is_section_header(line):
        return None

    return line
