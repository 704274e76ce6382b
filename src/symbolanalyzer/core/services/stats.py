from __future__ import annotations

"""
Category Statistics Service.

Summarizes a finished hierarchy per origin category: how many leaf symbols
each category owns, their combined size, and their share of the total.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable

from symbolanalyzer.core.analysis.classifier import classify
from symbolanalyzer.domain.tree_models import CATEGORY_ORDER, Category, TreeNode


@dataclass
class CategoryStats:
    size: int = 0
    count: int = 0
    percentage: float = 0.0


@dataclass
class CategoryReport:
    """Statistics of every category plus the totals they are measured against."""
    total_size: int
    total_count: int
    categories: Dict[Category, CategoryStats] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            "total_size": self.total_size,
            "total_count": self.total_count,
            "categories": {
                cat.value: {
                    "size": stat.size,
                    "count": stat.count,
                    "percentage": round(stat.percentage, 2),
                }
                for cat, stat in self.categories.items()
            },
        }


def compute_category_stats(root: TreeNode) -> CategoryReport:
    """
    Aggregate leaf sizes and counts per category.

    Leaves are classified by the name of the record that created them.
    Percentages are relative to the aggregated size of the root.

    Args:
        root: Finished hierarchy.

    Returns:
        CategoryReport: All categories in display order, including empty ones.
    """
    stats = {cat: CategoryStats() for cat in CATEGORY_ORDER}
    total_count = 0

    for leaf in _leaves_below(root):
        stat = stats[classify(leaf.original_qualified_name)]
        stat.size += leaf.aggregated_size
        stat.count += 1
        total_count += 1

    if root.aggregated_size > 0:
        for stat in stats.values():
            stat.percentage = (stat.size / root.aggregated_size) * 100

    return CategoryReport(
        total_size=root.aggregated_size,
        total_count=total_count,
        categories=stats,
    )


def _leaves_below(root: TreeNode) -> Iterable[TreeNode]:
    # An empty root is not a symbol
    if root.is_leaf:
        return []
    return root.iter_leaves()
