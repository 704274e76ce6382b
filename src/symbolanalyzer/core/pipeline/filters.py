from __future__ import annotations

"""
Hierarchy Filter Predicate.

Stateless visibility test combining the three user controls: minimum
size, category selection and free-text search. The predicate only reads
nodes, so it can be re-evaluated on every filter change.
"""

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Iterable, Optional

from symbolanalyzer.core.analysis.classifier import classify
from symbolanalyzer.domain.tree_models import Category, TreeNode

# -----------------------------------------------------------------------------
# FILTER STATE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FilterState:
    """
    Current filter selection.

    Attributes:
        min_size: Nodes smaller than this (aggregated) size are hidden.
        active_categories: Visible categories; empty means all.
        search_term: Case-insensitive substring; empty means all.
    """
    min_size: int = 0
    active_categories: FrozenSet[Category] = field(default_factory=frozenset)
    search_term: str = ""

    @classmethod
    def create(
            cls,
            min_size: int = 0,
            categories: Optional[Iterable[Category]] = None,
            search_term: Optional[str] = None,
    ) -> FilterState:
        return cls(
            min_size=int(min_size or 0),
            active_categories=frozenset(categories or ()),
            search_term=search_term or "",
        )

    def toggle(self, category: Category) -> FilterState:
        """Return a copy with the category added or removed."""
        if category in self.active_categories:
            active = self.active_categories - {category}
        else:
            active = self.active_categories | {category}
        return FilterState(self.min_size, frozenset(active), self.search_term)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def matches_filters(
        node: TreeNode,
        min_size: int = 0,
        active_categories: AbstractSet[Category] = frozenset(),
        search_term: str = "",
) -> bool:
    """
    Evaluate the conjunction of size, category and search conditions.

    Args:
        node: Node under test.
        min_size: Minimum aggregated size.
        active_categories: Allowed categories (empty allows all).
        search_term: Substring to look for (empty matches all).

    Returns:
        bool: True if the node should be visible.
    """
    if node.size < min_size:
        return False

    if active_categories:
        category = classify(node.original_qualified_name or node.segment_name)
        if category not in active_categories:
            return False

    if search_term:
        haystack = node.original_qualified_name or node.full_path_key or node.segment_name
        if search_term.lower() not in haystack.lower():
            return False

    return True


def matches(node: TreeNode, state: FilterState) -> bool:
    """Evaluate a node against a FilterState."""
    return matches_filters(node, state.min_size, state.active_categories, state.search_term)
