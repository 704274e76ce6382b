from __future__ import annotations

from symbolanalyzer.core.analysis.classifier import classify
from symbolanalyzer.core.pipeline.engine import analyze_rows, build_hierarchy
from symbolanalyzer.core.pipeline.filters import FilterState, matches, matches_filters
from symbolanalyzer.domain.tree_models import Category, SymbolRecord, TreeNode

__version__ = "1.0.0"

__all__ = [
    "Category",
    "FilterState",
    "SymbolRecord",
    "TreeNode",
    "analyze_rows",
    "build_hierarchy",
    "classify",
    "matches",
    "matches_filters",
]
