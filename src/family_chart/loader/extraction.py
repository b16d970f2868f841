# src/family_chart/loader/extraction.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# "(1920-1995)", "(ca1920-)", "(<1900->1950)", "(1880-ca1945)", "(-1980)".
# Years are ASCII digits only.
YEAR_RANGE_RE = re.compile(
    r"\((ca[0-9]{4}|[<>]?[0-9]{4})?\s*-\s*(ca[0-9]{4}|[<>]?[0-9]{4})?\)"
)
_APPROX_MARKERS_RE = re.compile(r"[<>ca]")

_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
# Marker must be a whole word: "René" keeps its "né".
_LOCALIZED_NAME_RE = re.compile(r"\s*(?<!\w)(?:VN|né|née)\s+\S+", re.IGNORECASE)


@dataclass(frozen=True)
class YearRange:
    birth_year: Optional[int] = None
    death_year: Optional[int] = None


def _parse_year_token(token: Optional[str]) -> Optional[int]:
    if not token:
        return None
    cleaned = _APPROX_MARKERS_RE.sub("", token)
    try:
        return int(cleaned)
    except ValueError:
        return None


def parse_years(text: str) -> YearRange:
    """
    Pull birth/death years out of the first parenthesized range in ``text``.

    Either side may be missing. Approximation markers (``<``, ``>``, ``ca``)
    are dropped. No range at all gives an empty YearRange.
    """
    match = YEAR_RANGE_RE.search(text)
    if not match:
        return YearRange()

    return YearRange(
        birth_year=_parse_year_token(match.group(1)),
        death_year=_parse_year_token(match.group(2)),
    )


def extract_name(text: str) -> str:
    """
    Clean display name: drop every parenthetical and any localized-name
    annotation (``VN x``, ``né x``, ``née x``), then trim.
    """
    out = _PARENTHETICAL_RE.sub("", text)
    out = _LOCALIZED_NAME_RE.sub("", out)
    return out.strip()


def normalize_name_key(name: str) -> str:
    """Comparison key for same-slot records: lowercase, all whitespace removed."""
    return "".join(name.lower().split())
