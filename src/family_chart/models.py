# src/family_chart/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass
class Spouse:
    """
    A marriage/partnership record owned by exactly one Person.

    Attributes:
        name: Display name from the ``&`` line.
        name_vn: Optional localized name (``TênVN.`` following the spouse).
        children_ids: Person ids of the children listed under this spouse,
            in the order they appear in the chart.
        marriage_date: Free-text value of an ``m.`` line.
        divorce_date: Free-text value of a ``div.`` line.
    """

    name: str
    name_vn: Optional[str] = None
    children_ids: List[str] = field(default_factory=list)
    marriage_date: Optional[str] = None
    divorce_date: Optional[str] = None

    def add_child(self, person_id: str) -> bool:
        """Append a child id unless already listed. Returns True if added."""
        if person_id in self.children_ids:
            return False
        self.children_ids.append(person_id)
        return True


@dataclass
class Person:
    """
    An individual in the chart.

    ``id`` is assigned once by the parser and never changes. ``parent_id`` is
    a plain lookup key into ``FamilyData.all_persons``, not an owning link.
    """

    id: str
    generation: int
    child_index: str
    name: str
    name_vn: Optional[str] = None
    alias: Optional[List[str]] = None
    house_name: Optional[str] = None
    birth_year: Optional[int] = None
    death_year: Optional[int] = None
    memorial_date: Optional[str] = None
    religious_name: Optional[str] = None
    spouses: List[Spouse] = field(default_factory=list)
    parent_id: Optional[str] = None

    def add_alias(self, value: str) -> None:
        if self.alias is None:
            self.alias = []
        self.alias.append(value)

    @property
    def last_spouse(self) -> Optional[Spouse]:
        return self.spouses[-1] if self.spouses else None

    def all_children_ids(self) -> List[str]:
        """All child ids across every spouse, in spouse order."""
        out: List[str] = []
        for spouse in self.spouses:
            out.extend(spouse.children_ids)
        return out

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<Person {self.id} g{self.generation} {self.name!r}>"


@dataclass
class FamilyData:
    """
    Parse result: every Person keyed by id, plus the id of the first
    generation-1 Person seen (empty string when there is none).
    """

    all_persons: Dict[str, Person] = field(default_factory=dict)
    root_id: str = ""

    def __len__(self) -> int:
        return len(self.all_persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.all_persons.values())

    def __contains__(self, person_id: object) -> bool:
        return person_id in self.all_persons

    def get(self, person_id: Optional[str]) -> Optional[Person]:
        if not person_id:
            return None
        return self.all_persons.get(person_id)

    @property
    def root(self) -> Optional[Person]:
        """The root Person, or None when root_id is empty or dangling."""
        return self.get(self.root_id)

    def persons(self) -> List[Person]:
        """Flat list of persons, as handed to search consumers."""
        return list(self.all_persons.values())

    def spouse_count(self) -> int:
        return sum(len(p.spouses) for p in self.all_persons.values())
