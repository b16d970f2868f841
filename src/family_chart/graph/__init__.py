from family_chart.graph.traversal import (
    expand_generation,
    generation_counts,
    iter_descendants,
    path_to_root,
    persons_in_generation,
    visible_persons,
)

__all__ = [
    "expand_generation",
    "generation_counts",
    "iter_descendants",
    "path_to_root",
    "persons_in_generation",
    "visible_persons",
]
