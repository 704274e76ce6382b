from __future__ import annotations

"""
Hierarchy Renderer.

Converts a size hierarchy into an ASCII tree for terminals and reports.
Siblings are listed largest first; top-level entries honor the full
filter state, nested entries only the minimum size.
"""

from typing import List, Tuple

from symbolanalyzer.core.analysis.classifier import classify
from symbolanalyzer.core.pipeline.filters import FilterState, matches
from symbolanalyzer.domain.tree_models import TreeNode
from symbolanalyzer.utils.formatting import format_bytes, format_percentage

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_hierarchy(
        root: TreeNode,
        state: FilterState,
        max_depth: int = 0,
) -> List[str]:
    """
    Render the visible part of a hierarchy.

    Args:
        root: Finished hierarchy.
        state: Active filter selection.
        max_depth: Number of levels to expand (0 expands everything).

    Returns:
        List[str]: One line per visible node.
    """
    lines: List[str] = []
    total = root.aggregated_size
    visible = [child for child in _sorted_children(root) if matches(child, state)]

    # (node, prefix, is_last, depth); pushed in reverse so output stays in order
    stack: List[Tuple[TreeNode, str, bool, int]] = [
        (child, "", i == len(visible) - 1, 1) for i, child in enumerate(visible)
    ]
    stack.reverse()

    while stack:
        node, prefix, is_last, depth = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{describe_node(node, total, top_level=(depth == 1))}")

        if max_depth and depth >= max_depth:
            continue

        children = [c for c in _sorted_children(node) if c.aggregated_size >= state.min_size]
        child_prefix = prefix + ("    " if is_last else "│   ")
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], child_prefix, i == len(children) - 1, depth + 1))

    return lines


def describe_node(node: TreeNode, total: int, top_level: bool = False) -> str:
    """Label of one node: name, instantiation badge, category, size and share."""
    parts = [node.segment_name]
    if node.instantiation_count > 1:
        parts.append(f"[{node.instantiation_count + 1}x]")
    if top_level:
        category = classify(node.original_qualified_name or node.full_path_key or node.segment_name)
        parts.append(f"<{category.value}>")
    parts.append(format_bytes(node.aggregated_size))
    share = format_percentage(node.aggregated_size, total)
    if share:
        parts.append(share)
    return " ".join(parts)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _sorted_children(node: TreeNode) -> List[TreeNode]:
    return sorted(node.children.values(), key=lambda c: (-c.aggregated_size, c.segment_name))
