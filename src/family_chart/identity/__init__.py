from family_chart.identity.person_keys import (
    ROOT_MARKER,
    base_index,
    candidate_ids,
    canonical_person_id,
)

__all__ = [
    "ROOT_MARKER",
    "base_index",
    "candidate_ids",
    "canonical_person_id",
]
