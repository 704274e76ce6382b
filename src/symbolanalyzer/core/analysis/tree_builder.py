from __future__ import annotations

"""
Symbol Tree Builder.

Inserts canonical records into a single hierarchy keyed by path segment,
aggregates sizes bottom-up in one pass, and freezes the result. Draft
nodes are private to this module; callers only ever receive immutable
TreeNode values.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from symbolanalyzer.core.analysis.segmenter import segment_symbol
from symbolanalyzer.domain.constants import PATH_SEPARATOR
from symbolanalyzer.domain.tree_models import SymbolRecord, TreeNode, freeze_children

logger = logging.getLogger(__name__)

Segmenter = Callable[[str], List[str]]

# -----------------------------------------------------------------------------
# DRAFT STRUCTURE
# -----------------------------------------------------------------------------

class _DraftNode:
    """Mutable node used only while records are being inserted."""

    __slots__ = (
        "name", "own_size", "children", "original_symbol", "full_path", "instantiations",
    )

    def __init__(
            self,
            name: str,
            original_symbol: Optional[str] = None,
            full_path: Optional[str] = None,
    ):
        self.name = name
        self.own_size = 0
        self.children: Dict[str, _DraftNode] = {}
        self.original_symbol = original_symbol
        self.full_path = full_path
        self.instantiations = 0

    def child(self, segment: str, path: str, record: SymbolRecord) -> _DraftNode:
        """Return the child for a segment, creating it on first visit only."""
        existing = self.children.get(segment)
        if existing is not None:
            return existing

        created = _DraftNode(segment, original_symbol=record.qualified_name, full_path=path)
        self.children[segment] = created
        return created

# -----------------------------------------------------------------------------
# BUILDER
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Accumulates records and produces a frozen hierarchy.

    A builder is single use: once build() has run, further inserts are
    rejected so that the returned tree is the only view of the data.
    """

    def __init__(self, segmenter: Segmenter = segment_symbol):
        self._segmenter = segmenter
        self._root = _DraftNode("")
        self._built = False
        self.inserted = 0
        self.skipped = 0

    def insert(self, record: SymbolRecord) -> bool:
        """
        Add one record to the hierarchy.

        Args:
            record: Canonical record to place.

        Returns:
            bool: False if the record produced no segment.
        """
        if self._built:
            raise RuntimeError("TreeBuilder already produced its tree.")

        segments = self._segmenter(record.qualified_name)
        if not segments:
            return False

        current = self._root
        path = ""
        for segment in segments:
            path = f"{path}{PATH_SEPARATOR}{segment}" if path else segment
            current = current.child(segment, path, record)

        current.own_size += record.size_bytes
        current.instantiations += record.instantiation_count
        return True

    def insert_all(self, records: Iterable[SymbolRecord]) -> None:
        """Insert records, skipping any single record that fails."""
        if self._built:
            raise RuntimeError("TreeBuilder already produced its tree.")

        for record in records:
            try:
                if self.insert(record):
                    self.inserted += 1
                else:
                    self.skipped += 1
            except Exception as e:
                self.skipped += 1
                logger.warning(f"Error processing symbol {record.qualified_name!r}: {e}")

    def build(self) -> TreeNode:
        """Aggregate sizes and freeze the hierarchy."""
        if self._built:
            raise RuntimeError("TreeBuilder already produced its tree.")
        self._built = True
        logger.debug(f"Tree built: {self.inserted} records inserted, {self.skipped} skipped.")
        return _freeze(self._root)


def build_tree(records: Iterable[SymbolRecord], segmenter: Segmenter = segment_symbol) -> TreeNode:
    """
    Build the frozen size hierarchy for a sequence of canonical records.

    Args:
        records: Deduplicated canonical records.
        segmenter: Function splitting a name into path segments.

    Returns:
        TreeNode: Root sentinel of the aggregated hierarchy.
    """
    builder = TreeBuilder(segmenter)
    builder.insert_all(records)
    return builder.build()

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _freeze(root: _DraftNode) -> TreeNode:
    """
    Single bottom-up pass computing aggregated sizes while freezing.

    Post-order walk with an explicit stack: a draft is frozen once all of
    its children are, whatever the depth of the hierarchy.
    """
    frozen: Dict[int, TreeNode] = {}
    stack = [(root, False)]

    while stack:
        draft, children_done = stack.pop()
        if not children_done:
            stack.append((draft, True))
            stack.extend((child, False) for child in draft.children.values())
            continue

        children = {name: frozen.pop(id(child)) for name, child in draft.children.items()}
        aggregated = draft.own_size + sum(child.aggregated_size for child in children.values())
        frozen[id(draft)] = TreeNode(
            segment_name=draft.name,
            own_size=draft.own_size,
            aggregated_size=aggregated,
            children=freeze_children(children),
            original_qualified_name=draft.original_symbol,
            full_path_key=draft.full_path,
            instantiation_count=draft.instantiations,
        )

    return frozen[id(root)]
