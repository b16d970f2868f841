"""
family_chart: turn a plain-text descendant chart into a family graph.

    from family_chart import parse_family_tree

    data = parse_family_tree(text)
    data.root_id, data.all_persons
"""

from family_chart.loader.tree_builder import (
    parse_family_tree,
    parse_family_tree_with_diagnostics,
)
from family_chart.models import FamilyData, Person, Spouse

__version__ = "0.1.0"

__all__ = [
    "FamilyData",
    "Person",
    "Spouse",
    "parse_family_tree",
    "parse_family_tree_with_diagnostics",
]
