"""
Person search over a parsed chart.

Two modes:
  - ``/pattern/flags`` (or ``/pattern``): regular expression over the
    indexed fields, case-insensitive unless flags are given.
  - anything else: fuzzy match, substring hits first, then
    SequenceMatcher similarity against the field and its words.

Indexed fields: name, localized name, aliases, house name. Any of them may
be missing on a given person.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Iterable, List, Optional, Pattern, Tuple

from family_chart.logging import get_logger
from family_chart.models import FamilyData, Person

log = get_logger("search")

MIN_QUERY_LENGTH = 2
DEFAULT_LIMIT = 10
DEFAULT_THRESHOLD = 0.3

_REGEX_QUERY_RE = re.compile(r"^/(.+)/([a-z]*)$")
_REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}
# Accepted for compatibility with /pattern/flags syntax; no effect on matching.
_NO_OP_FLAGS = frozenset("dguvy")


@dataclass(frozen=True)
class SearchResult:
    person: Person
    score: float
    field: Optional[str] = None
    matched: Optional[str] = None


def searchable_fields(person: Person) -> Iterable[Tuple[str, str]]:
    """(field, value) pairs indexed for ``person``; absent fields are skipped."""
    if person.name:
        yield "name", person.name
    if person.name_vn:
        yield "name_vn", person.name_vn
    for alias in person.alias or ():
        if alias:
            yield "alias", alias
    if person.house_name:
        yield "house_name", person.house_name


def compile_query_regex(query: str) -> Optional[Pattern[str]]:
    """
    Compile a ``/pattern/flags`` query.

    Invalid patterns, unknown flag letters and repeated flags give None.
    """
    match = _REGEX_QUERY_RE.match(query)
    if match:
        pattern, flag_chars = match.group(1), match.group(2)
    else:
        pattern, flag_chars = query[1:], "i"

    if len(set(flag_chars)) != len(flag_chars):
        log.debug("Repeated flags in search pattern %r", query)
        return None

    flags = 0
    for ch in flag_chars:
        if ch in _REGEX_FLAGS:
            flags |= _REGEX_FLAGS[ch]
        elif ch not in _NO_OP_FLAGS:
            log.debug("Unknown flag %r in search pattern %r", ch, query)
            return None

    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        log.debug("Invalid search pattern %r: %s", query, exc)
        return None


def _regex_search(persons: List[Person], regex: Pattern[str], limit: int) -> List[SearchResult]:
    results: List[SearchResult] = []
    for person in persons:
        if len(results) >= limit:
            break
        for field_name, value in searchable_fields(person):
            if regex.search(value):
                results.append(SearchResult(person, 1.0, field_name, value))
                break
    return results


def similarity(query: str, value: str) -> float:
    """Score in [0, 1]: 1.0 for a substring hit, else the best word/field ratio."""
    q = query.lower().strip()
    v = value.lower()
    if not q or not v:
        return 0.0
    if q in v:
        return 1.0

    best = SequenceMatcher(None, q, v).ratio()
    for word in v.split():
        best = max(best, SequenceMatcher(None, q, word).ratio())
    return best


def _fuzzy_search(
    persons: List[Person],
    query: str,
    limit: int,
    threshold: float,
) -> List[SearchResult]:
    cutoff = 1.0 - threshold
    results: List[SearchResult] = []

    for person in persons:
        best: Optional[SearchResult] = None
        for field_name, value in searchable_fields(person):
            score = similarity(query, value)
            if best is None or score > best.score:
                best = SearchResult(person, score, field_name, value)
        if best is not None and best.score >= cutoff:
            results.append(best)

    results.sort(key=lambda r: (-r.score, r.person.id))
    return results[:limit]


def search_persons(
    data: FamilyData,
    query: str,
    limit: int = DEFAULT_LIMIT,
    threshold: float = DEFAULT_THRESHOLD,
) -> List[SearchResult]:
    """
    Search persons in ``data``.

    Queries shorter than two characters, and a limit below one, return nothing.
    """
    if data is None or limit <= 0 or len(query) < MIN_QUERY_LENGTH:
        return []

    persons = data.persons()

    if query.startswith("/"):
        regex = compile_query_regex(query)
        if regex is None:
            return []
        return _regex_search(persons, regex, limit)

    return _fuzzy_search(persons, query, limit, threshold)
