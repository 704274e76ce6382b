from __future__ import annotations

"""
Analysis Result Data Models.

Defines the objects exchanged between the analysis engine and the
interface layer, together with the factory functions that build them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from symbolanalyzer.domain.tree_models import TreeNode, node_to_dict

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class HierarchyBuild:
    """
    Output of one pass of the transformation pipeline.

    Attributes:
        tree: Annotated, frozen hierarchy root.
        max_size: Largest canonical record size (0 when empty).
        rows_in: Number of raw rows received.
        rows_kept: Rows surviving normalization.
        records: Canonical records after instantiation collapsing.
    """
    tree: TreeNode
    max_size: int = 0
    rows_in: int = 0
    rows_kept: int = 0
    records: int = 0


@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result of a complete analysis run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: CSV file that was analyzed.
        tree: Hierarchy root (None on failure).
        stats: Per-category statistics payload.
        max_size: Largest canonical record size.
        record_count: Number of canonical records inserted.
        tree_lines: Rendered text lines of the filtered hierarchy.
        summary: Execution counters and metadata.
    """
    ok: bool
    error: str
    input_path: str

    tree: Optional[TreeNode] = None
    stats: Dict[str, Any] = field(default_factory=dict)
    max_size: int = 0
    record_count: int = 0
    tree_lines: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "error": self.error,
            "input_path": self.input_path,
            "max_size": self.max_size,
            "record_count": self.record_count,
            "stats": self.stats,
            "summary": self.summary,
            "tree": node_to_dict(self.tree) if self.tree is not None else None,
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        input_path: str,
        summary_extra: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """
    Create a failed analysis result.

    Args:
        error: Detailed error description.
        input_path: The CSV file that was targeted.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        input_path=input_path,
        summary=summary_extra or {},
    )


def create_success_result(
        input_path: str,
        build: HierarchyBuild,
        stats: Optional[Dict[str, Any]] = None,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """
    Create a successful analysis result.

    Args:
        input_path: The analyzed CSV file.
        build: Pipeline output holding the hierarchy and counters.
        stats: Per-category statistics payload.
        tree_lines: Rendered hierarchy lines.
        summary_extra: Extra metadata merged over the build counters.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    summary: Dict[str, Any] = {
        "rows_in": build.rows_in,
        "rows_kept": build.rows_kept,
        "records": build.records,
        "total_size": build.tree.aggregated_size,
    }
    summary.update(summary_extra or {})

    return AnalysisResult(
        ok=True,
        error="",
        input_path=input_path,
        tree=build.tree,
        stats=stats or {},
        max_size=build.max_size,
        record_count=build.records,
        tree_lines=tree_lines or [],
        summary=summary,
    )
