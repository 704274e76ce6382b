from __future__ import annotations

"""
Hierarchy Session.

Holds the hierarchy currently shown to the user. Every build is tagged
with a monotonically increasing token; only the most recently started
build may publish its tree, so a slow decode of an older file can never
replace the result of a newer one.
"""

import logging
import threading
from typing import Optional

from symbolanalyzer.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)


class HierarchySession:
    """Thread-safe holder of the current hierarchy snapshot."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sequence = 0
        self._tree: Optional[TreeNode] = None
        self._source: Optional[str] = None

    def begin(self) -> int:
        """Start a new build and return its token."""
        with self._lock:
            self._sequence += 1
            return self._sequence

    def commit(self, token: int, tree: TreeNode, source: Optional[str] = None) -> bool:
        """
        Publish a finished tree if its build is still the newest one.

        Args:
            token: Value returned by begin() for this build.
            tree: Finished hierarchy.
            source: Optional label of the analyzed input.

        Returns:
            bool: False when the result is stale and was discarded.
        """
        with self._lock:
            if token != self._sequence:
                logger.debug(f"Discarding stale build {token} (current: {self._sequence}).")
                return False
            self._tree = tree
            self._source = source
            return True

    def clear(self) -> None:
        """Forget the current tree and invalidate in-flight builds."""
        with self._lock:
            self._sequence += 1
            self._tree = None
            self._source = None

    @property
    def tree(self) -> Optional[TreeNode]:
        return self._tree

    @property
    def source(self) -> Optional[str]:
        return self._source
