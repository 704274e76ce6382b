from __future__ import annotations

"""
Symbol Hierarchy Data Models.

Provides the records, tree nodes and categories shared by every stage of
the analysis pipeline. Tree nodes are frozen values: the builder assembles
them once and downstream consumers (classifier, filters, renderer) only
read them.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

# -----------------------------------------------------------------------------
# CATEGORIES
# -----------------------------------------------------------------------------

class Category(Enum):
    """Probable toolchain origin of a symbol."""
    CPP = "C++"
    RUST = "Rust"
    ZIG = "Zig"
    SYSV = "SYS-V"
    OTHER = "Other"

    @classmethod
    def parse(cls, text: str) -> Category:
        """
        Resolve a category from its member name or display label.

        Args:
            text: User supplied identifier (e.g. 'cpp', 'C++', 'sys-v').

        Returns:
            Category: The matching member.

        Raises:
            ValueError: If the text names no category.
        """
        needle = (text or "").strip().lower()
        for member in cls:
            if needle in (member.name.lower(), member.value.lower()):
                return member
        raise ValueError(f"Unknown category: {text!r}")


# Order used by statistics and reports
CATEGORY_ORDER: Tuple[Category, ...] = (
    Category.CPP,
    Category.ZIG,
    Category.RUST,
    Category.SYSV,
    Category.OTHER,
)

# -----------------------------------------------------------------------------
# PIPELINE RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SymbolRecord:
    """
    One profiler row after validation (and possibly deduplication).

    Attributes:
        qualified_name: Full symbol identifier as emitted by the profiler.
        size_bytes: Contribution to the binary size.
        instantiation_count: Number of compiler-generated variants folded in.
    """
    qualified_name: str
    size_bytes: int = 0
    instantiation_count: int = 0


@dataclass(frozen=True)
class SymbolGroup:
    """Leaves sharing the same instantiation-stripped segment name."""
    base_name: str
    total_size: int
    member_count: int
    member_names: Tuple[str, ...] = ()

# -----------------------------------------------------------------------------
# HIERARCHY
# -----------------------------------------------------------------------------

_EMPTY_CHILDREN: Mapping[str, "TreeNode"] = MappingProxyType({})


@dataclass(frozen=True)
class TreeNode:
    """
    Immutable node of the size hierarchy.

    Attributes:
        segment_name: Path component represented by this node ('' for root).
        own_size: Bytes attributed directly to this node.
        aggregated_size: own_size plus the aggregated size of every child.
        children: Read-only mapping of segment name to child node.
        original_qualified_name: Name of the first record that created the node.
        full_path_key: '::'-joined path from the root to this node.
        instantiation_count: Displayed number of instantiations.
    """
    segment_name: str
    own_size: int = 0
    aggregated_size: int = 0
    children: Mapping[str, TreeNode] = field(default_factory=lambda: _EMPTY_CHILDREN)
    original_qualified_name: Optional[str] = None
    full_path_key: Optional[str] = None
    instantiation_count: int = 0

    @property
    def size(self) -> int:
        return self.aggregated_size

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Yield this node and all of its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node.children.values())))

    def iter_leaves(self) -> Iterator[TreeNode]:
        return (node for node in self.iter_nodes() if node.is_leaf)


def freeze_children(children: Mapping[str, TreeNode]) -> Mapping[str, TreeNode]:
    """Wrap a child mapping into a read-only view detached from its source."""
    if not children:
        return _EMPTY_CHILDREN
    return MappingProxyType(dict(children))


def node_to_dict(node: TreeNode) -> dict:
    """
    Convert a node and its subtree into plain JSON-compatible structures.

    The walk uses an explicit stack, so depth is not bounded by the
    interpreter recursion limit.
    """
    payload = _node_fields(node)
    stack = [(node, payload)]
    while stack:
        current, current_payload = stack.pop()
        for child in current.children.values():
            child_payload = _node_fields(child)
            current_payload["children"].append(child_payload)
            stack.append((child, child_payload))
    return payload


def _node_fields(node: TreeNode) -> dict:
    return {
        "name": node.segment_name,
        "own_size": node.own_size,
        "size": node.aggregated_size,
        "original_symbol": node.original_qualified_name,
        "full_path": node.full_path_key,
        "instantiations": node.instantiation_count,
        "children": [],
    }
