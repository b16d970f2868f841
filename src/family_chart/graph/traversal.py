"""
Read-only queries over a parsed FamilyData graph.

Consumers (layout, search, tree state) only see identity strings and the
FamilyData mapping, so every function here tolerates dangling ids and never
loops, even on a malformed chart that produced a parent cycle.
"""

from __future__ import annotations

from collections import Counter
from typing import AbstractSet, Dict, Iterator, List, Optional, Set

from family_chart.models import FamilyData, Person


def path_to_root(data: FamilyData, person_id: str) -> List[str]:
    """
    Ids from ``person_id`` up through parent links, person first.

    Stops at the first id missing from the graph or already visited.
    """
    path: List[str] = []
    seen: Set[str] = set()
    current: Optional[Person] = data.get(person_id)

    while current is not None and current.id not in seen:
        path.append(current.id)
        seen.add(current.id)
        current = data.get(current.parent_id)

    return path


def iter_descendants(data: FamilyData, person_id: str) -> Iterator[Person]:
    """Depth-first walk over spouse children, in chart order. Each person once."""
    seen: Set[str] = {person_id}
    start = data.get(person_id)
    if start is None:
        return

    stack: List[str] = list(reversed(start.all_children_ids()))
    while stack:
        child_id = stack.pop()
        if child_id in seen:
            continue
        seen.add(child_id)

        child = data.get(child_id)
        if child is None:
            continue
        yield child
        stack.extend(reversed(child.all_children_ids()))


def visible_persons(data: FamilyData, expanded: AbstractSet[str]) -> Set[str]:
    """
    Ids shown in the tree view for a given expansion state.

    The root is always visible; a person's children are visible only when
    that person is expanded. Empty when the root is missing.
    """
    visible: Set[str] = set()
    root = data.root
    if root is None:
        return visible

    stack: List[str] = [root.id]
    while stack:
        person_id = stack.pop()
        if person_id in visible:
            continue
        person = data.get(person_id)
        if person is None:
            continue
        visible.add(person_id)

        if person_id in expanded:
            stack.extend(person.all_children_ids())

    return visible


def persons_in_generation(data: FamilyData, generation: int) -> List[Person]:
    return [p for p in data if p.generation == generation]


def generation_counts(data: FamilyData) -> Dict[int, int]:
    """Number of persons per generation, sorted by generation."""
    counts = Counter(p.generation for p in data)
    return dict(sorted(counts.items()))


def expand_generation(
    expanded: AbstractSet[str],
    data: FamilyData,
    generation: int,
    expand: bool,
) -> Set[str]:
    """Return a copy of ``expanded`` with one generation added or removed."""
    out = set(expanded)
    ids = {p.id for p in persons_in_generation(data, generation)}
    if expand:
        out |= ids
    else:
        out -= ids
    return out
