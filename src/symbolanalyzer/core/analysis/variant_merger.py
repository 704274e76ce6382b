from __future__ import annotations

"""
Variant Merger.

Post-build annotation pass. Leaves that only differ by an anonymous
instantiation suffix are grouped, and every node named after a group
displays the group's member count. The structure of the tree is never
changed: each instantiation remains its own child for drill-down.
"""

import logging
from dataclasses import replace
from typing import Dict, List

from symbolanalyzer.core.pipeline.collapser import strip_suffixes
from symbolanalyzer.domain.constants import NODE_SUFFIX_PATTERNS
from symbolanalyzer.domain.tree_models import SymbolGroup, TreeNode, freeze_children

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def variant_base_name(segment_name: str) -> str:
    """Strip anonymous instantiation suffixes from a single segment name."""
    return strip_suffixes(segment_name, NODE_SUFFIX_PATTERNS)


def collect_variant_groups(root: TreeNode) -> Dict[str, SymbolGroup]:
    """
    Group the leaves of a tree by their instantiation-stripped name.

    Args:
        root: Built hierarchy.

    Returns:
        Dict[str, SymbolGroup]: Groups keyed by non-empty base name.
    """
    sizes: Dict[str, int] = {}
    names: Dict[str, List[str]] = {}

    for leaf in root.iter_leaves():
        base = variant_base_name(leaf.segment_name)
        if not base:
            continue
        sizes[base] = sizes.get(base, 0) + leaf.aggregated_size
        members = names.setdefault(base, [])
        if leaf.original_qualified_name:
            members.append(leaf.original_qualified_name)
        else:
            members.append(leaf.segment_name)

    return {
        base: SymbolGroup(
            base_name=base,
            total_size=sizes[base],
            member_count=len(names[base]),
            member_names=tuple(names[base]),
        )
        for base in sizes
    }


def merge_variants(root: TreeNode) -> TreeNode:
    """
    Annotate instantiation counts across the whole tree.

    Args:
        root: Built hierarchy (left untouched).

    Returns:
        TreeNode: A new frozen tree with identical structure and sizes in
                  which every node whose stripped name matches a leaf group
                  carries that group's member count.
    """
    groups = collect_variant_groups(root)
    logger.debug(f"Variant merger found {len(groups)} leaf groups.")
    return _annotate(root, groups)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _annotate(root: TreeNode, groups: Dict[str, SymbolGroup]) -> TreeNode:
    """Rebuild the tree bottom-up with an explicit stack (post-order)."""
    rebuilt: Dict[int, TreeNode] = {}
    stack = [(root, False)]

    while stack:
        node, children_done = stack.pop()
        if not children_done:
            stack.append((node, True))
            stack.extend((child, False) for child in node.children.values())
            continue

        children = {key: rebuilt[id(child)] for key, child in node.children.items()}
        count = node.instantiation_count
        group = groups.get(variant_base_name(node.segment_name))
        if group is not None:
            count = group.member_count
        rebuilt[id(node)] = replace(node, children=freeze_children(children), instantiation_count=count)

    return rebuilt[id(root)]
