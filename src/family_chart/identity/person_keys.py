# src/family_chart/identity/person_keys.py
from __future__ import annotations

import re
from itertools import count
from typing import Iterator, Optional

ROOT_MARKER = "root"

_DISAMBIGUATION_SUFFIX_RE = re.compile(r"[a-z]$")


# -----------------------------
# Canonical slot
# -----------------------------

def base_index(child_index: str) -> str:
    """
    Strip a trailing disambiguation letter from a sibling index.

    "5a" -> "5", "5" -> "5".
    """
    return _DISAMBIGUATION_SUFFIX_RE.sub("", child_index)


def canonical_person_id(
    parent_id: Optional[str],
    generation: int,
    child_index: str,
) -> str:
    """
    Deterministic key for the (parent, generation, base index) slot.

    Split records such as "5a" and "5b" under the same parent share one
    canonical id; the resolver decides whether they are the same person.
    Keys only contain ASCII letters, digits, "_" and "-".
    """
    prefix = parent_id if parent_id else ROOT_MARKER
    return f"{prefix}_g{generation}-{base_index(child_index)}"


# -----------------------------
# Collision probing
# -----------------------------

def candidate_ids(canonical_id: str) -> Iterator[str]:
    """
    Yield the canonical id, then "<id>_2", "<id>_3", ... without bound.

    The caller stops at the first free or same-name candidate, so the walk
    is O(k) in the number of prior collisions in the slot.
    """
    yield canonical_id
    for suffix in count(2):
        yield f"{canonical_id}_{suffix}"


__all__ = [
    "ROOT_MARKER",
    "base_index",
    "canonical_person_id",
    "candidate_ids",
]
