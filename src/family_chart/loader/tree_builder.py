# src/family_chart/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from family_chart.identity.person_keys import candidate_ids, canonical_person_id
from family_chart.logging import get_logger
from family_chart.models import FamilyData, Person, Spouse

from .classifier import MetadataField, Record, RecordKind, classify_line
from .diagnostics import DiagnosticKind, ParseDiagnostics
from .extraction import extract_name, normalize_name_key, parse_years
from .normalizer import PROVENANCE_RE, is_section_header, normalize_line, split_lines

log = get_logger("loader.tree_builder")


@dataclass
class ParserState:
    """
    Everything one parse carries from line to line.

    Attributes:
        persons: Arena of every Person seen so far, keyed by id.
        focus_id: Id of the person that metadata and spouse lines attach to.
        focus_spouse: Most recent Spouse of the focus person, cleared on
            every person line.
        ancestry: (generation, person_id) pairs for the open ancestors.
        root_id: Id of the first generation-1 person, set once.
        diagnostics: Non-fatal notes for this parse.
    """

    persons: Dict[str, Person] = field(default_factory=dict)
    focus_id: Optional[str] = None
    focus_spouse: Optional[Spouse] = None
    ancestry: List[Tuple[int, str]] = field(default_factory=list)
    root_id: str = ""
    diagnostics: ParseDiagnostics = field(default_factory=ParseDiagnostics)

    @property
    def focus(self) -> Optional[Person]:
        if self.focus_id is None:
            return None
        return self.persons.get(self.focus_id)

    def note(self, record: Record, kind: DiagnosticKind, message: str) -> None:
        self.diagnostics.add(record.lineno, kind, message, record.raw)
        log.debug("line %d: %s (%s)", record.lineno, message, kind.value)

    # ------------------------------------------------------------------ #
    # Ancestry stack
    # ------------------------------------------------------------------ #

    def open_parent(self, generation: int) -> Optional[str]:
        """Pop ancestors at or below ``generation``; return the nearest one left."""
        while self.ancestry and self.ancestry[-1][0] >= generation:
            self.ancestry.pop()
        return self.ancestry[-1][1] if self.ancestry else None

    def resolve_identity(self, canonical_id: str, name: str) -> Tuple[str, bool]:
        """
        Try ``canonical_id``, ``canonical_id_2``, ... for this name.

        Returns (person_id, existed). A free candidate is claimed for a new
        person; an occupied candidate with the same normalized name is the
        same person; any other occupied candidate is skipped.
        """
        key = normalize_name_key(name)
        for candidate in candidate_ids(canonical_id):
            existing = self.persons.get(candidate)
            if existing is None:
                return candidate, False
            if normalize_name_key(existing.name) == key:
                return candidate, True
        raise AssertionError("unreachable")  # pragma: no cover

    def to_family_data(self) -> FamilyData:
        return FamilyData(all_persons=dict(self.persons), root_id=self.root_id)


# ---------------------------------------------------------------------- #
# Record handlers
# ---------------------------------------------------------------------- #

def _handle_person(state: ParserState, record: Record) -> None:
    generation = record.generation
    child_index = record.index
    text = record.text

    parent_id = state.open_parent(generation)
    canonical_id = canonical_person_id(parent_id, generation, child_index)

    years = parse_years(text)
    name = extract_name(text)

    person_id, existed = state.resolve_identity(canonical_id, name)

    if existed:
        state.note(
            record,
            DiagnosticKind.MERGED_RECORD,
            f"index {child_index} merged into {person_id} ({name})",
        )
    else:
        if person_id != canonical_id:
            state.note(
                record,
                DiagnosticKind.SLOT_COLLISION,
                f"slot {canonical_id} taken; {name!r} stored as {person_id}",
            )

        person = Person(
            id=person_id,
            generation=generation,
            child_index=child_index,
            name=name,
            birth_year=years.birth_year,
            death_year=years.death_year,
            parent_id=parent_id,
        )
        state.persons[person_id] = person

        if generation == 1 and not state.root_id:
            state.root_id = person_id

        if parent_id is not None:
            _attach_to_parent(state, record, parent_id, person_id)

    state.ancestry.append((generation, person_id))
    state.focus_id = person_id
    state.focus_spouse = None


def _attach_to_parent(state: ParserState, record: Record, parent_id: str, person_id: str) -> None:
    parent = state.persons.get(parent_id)
    if parent is None:
        return

    # Children follow the spouse line they belong to, so the latest one wins.
    spouse = parent.last_spouse
    if spouse is None:
        state.note(
            record,
            DiagnosticKind.UNATTACHED_CHILD,
            f"{person_id} has parent {parent_id} with no recorded spouse",
        )
        return

    spouse.add_child(person_id)


def _handle_spouse(state: ParserState, record: Record) -> None:
    person = state.focus
    if person is None:
        state.note(record, DiagnosticKind.NO_FOCUS_PERSON, "spouse line before any person")
        return

    spouse = Spouse(name=extract_name(record.text))
    person.spouses.append(spouse)
    state.focus_spouse = spouse


def _handle_metadata(state: ParserState, record: Record) -> None:
    person = state.focus
    if person is None:
        state.note(
            record,
            DiagnosticKind.NO_FOCUS_PERSON,
            f"{record.field.value} line before any person",
        )
        return

    value = record.value or ""
    kind = record.field
    spouse = state.focus_spouse

    if kind is MetadataField.ALIAS:
        person.add_alias(value)
    elif kind is MetadataField.HOUSE_NAME:
        person.house_name = value
    elif kind is MetadataField.MEMORIAL_DATE:
        person.memorial_date = value
    elif kind is MetadataField.RELIGIOUS_NAME:
        person.religious_name = value
    elif kind is MetadataField.NAME_VN:
        if spouse is not None:
            spouse.name_vn = value
        else:
            person.name_vn = value
    elif kind in (MetadataField.MARRIAGE, MetadataField.DIVORCE):
        if spouse is None:
            state.note(
                record,
                DiagnosticKind.NO_FOCUS_SPOUSE,
                f"{kind.value} date with no active spouse",
            )
        elif kind is MetadataField.MARRIAGE:
            spouse.marriage_date = value
        else:
            spouse.divorce_date = value


def _handle_ignored(state: ParserState, record: Record) -> None:
    state.note(record, DiagnosticKind.UNRECOGNIZED, "unrecognized line")


_HANDLERS: Dict[RecordKind, Callable[[ParserState, Record], None]] = {
    RecordKind.PERSON: _handle_person,
    RecordKind.SPOUSE: _handle_spouse,
    RecordKind.METADATA: _handle_metadata,
    RecordKind.IGNORED: _handle_ignored,
}


# ---------------------------------------------------------------------- #
# Entry points
# ---------------------------------------------------------------------- #

def iter_records(lines: Iterable[str], state: ParserState) -> Iterator[Record]:
    """
    Normalize and classify lines, noting skipped headers and stripped
    provenance stamps on ``state``.
    """
    for lineno, raw in enumerate(lines, start=1):
        line = normalize_line(raw)

        if line is None:
            if is_section_header(raw):
                state.diagnostics.add(
                    lineno, DiagnosticKind.SKIPPED_HEADER, "section header", raw.strip()
                )
            continue

        if PROVENANCE_RE.match(raw.strip()):
            state.diagnostics.add(
                lineno, DiagnosticKind.STRIPPED_PROVENANCE, "provenance prefix removed", raw.strip()
            )

        yield classify_line(line, lineno=lineno)


def build_family_tree(lines: Iterable[str]) -> Tuple[FamilyData, ParseDiagnostics]:
    """
    Fold chart lines into a FamilyData graph in a single ordered pass.

        lines -> records -> ParserState -> FamilyData
    """
    state = ParserState()

    for record in iter_records(lines, state):
        _HANDLERS[record.kind](state, record)

    data = state.to_family_data()
    log.debug(
        "Built family tree: persons=%d root=%s diagnostics=%d",
        len(data.all_persons),
        data.root_id or "-",
        len(state.diagnostics),
    )
    return data, state.diagnostics


def parse_family_tree_with_diagnostics(text: str) -> Tuple[FamilyData, ParseDiagnostics]:
    return build_family_tree(split_lines(text))


def parse_family_tree(text: str) -> FamilyData:
    """
    Parse a descendant chart into a FamilyData graph.

    Total over any string: unexpected lines contribute nothing.
    """
    data, _ = parse_family_tree_with_diagnostics(text)
    return data
