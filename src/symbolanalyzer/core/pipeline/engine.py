from __future__ import annotations

"""
Analysis Orchestration Pipeline.

Two levels of entry points:
1. build_hierarchy / analyze_rows: the pure transformation from decoded
   rows to an annotated, frozen hierarchy (normalize, collapse, build,
   merge variants).
2. run_analysis: the full workflow used by the interfaces (validate the
   configuration, decode the CSV file, remember it, build, compute
   statistics and render the filtered tree).
"""

import logging
import os
from typing import Any, Dict, Iterable, Optional

from symbolanalyzer.core.analysis.tree_builder import build_tree
from symbolanalyzer.core.analysis.tree_renderer import render_hierarchy
from symbolanalyzer.core.analysis.variant_merger import merge_variants
from symbolanalyzer.core.pipeline.collapser import collapse_instantiations
from symbolanalyzer.core.pipeline.filters import FilterState
from symbolanalyzer.core.pipeline.normalizer import normalize_rows
from symbolanalyzer.core.pipeline.validator import validate_config
from symbolanalyzer.core.services.session import HierarchySession
from symbolanalyzer.core.services.stats import compute_category_stats
from symbolanalyzer.domain.pipeline_models import (
    AnalysisResult,
    HierarchyBuild,
    create_error_result,
    create_success_result,
)
from symbolanalyzer.domain.tree_models import Category, TreeNode
from symbolanalyzer.infra.csv_reader import CsvDecodeError, read_rows
from symbolanalyzer.infra.fs import normalize_path
from symbolanalyzer.infra.recent_files import RecentFileStore

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# TRANSFORMATION CORE
# -----------------------------------------------------------------------------

def analyze_rows(rows: Iterable[Any]) -> HierarchyBuild:
    """
    Run the transformation pipeline and keep its counters.

    Args:
        rows: Decoded profiler rows.

    Returns:
        HierarchyBuild: Annotated hierarchy plus size and row metrics.
    """
    raw = list(rows)
    normalized = normalize_rows(raw)
    records = collapse_instantiations(normalized)
    max_size = max((r.size_bytes for r in records), default=0)

    tree = merge_variants(build_tree(records))

    logger.info(
        f"Hierarchy built from {len(raw)} rows: {len(normalized)} valid, "
        f"{len(records)} canonical symbols, {tree.aggregated_size} bytes."
    )
    return HierarchyBuild(
        tree=tree,
        max_size=max_size,
        rows_in=len(raw),
        rows_kept=len(normalized),
        records=len(records),
    )


def build_hierarchy(rows: Iterable[Any]) -> TreeNode:
    """Decoded rows -> annotated, frozen hierarchy root."""
    return analyze_rows(rows).tree

# -----------------------------------------------------------------------------
# FULL WORKFLOW
# -----------------------------------------------------------------------------

def filter_state_from_config(cfg: Dict[str, Any]) -> FilterState:
    """Build the filter selection described by a validated configuration."""
    return FilterState.create(
        min_size=cfg.get("min_size", 0),
        categories=[Category.parse(c) for c in cfg.get("categories", [])],
        search_term=cfg.get("search_term", ""),
    )


def run_analysis(
        config: Optional[Dict[str, Any]],
        *,
        recent_store: Optional[RecentFileStore] = None,
        session: Optional[HierarchySession] = None,
) -> AnalysisResult:
    """
    Analyze one profiler CSV export.

    Args:
        config: Session configuration (raw or partial).
        recent_store: Store used to remember the input; a default store in
                      the user data directory is used when omitted.
        session: Shared session; the build publishes its tree there and is
                 reported as superseded when a newer build started meanwhile.

    Returns:
        AnalysisResult: Hierarchy, statistics and rendered lines, or an
                        error result when the input cannot be decoded.
    """
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    input_path = normalize_path(cfg.get("input_path", ""))
    if not input_path or not os.path.isfile(input_path):
        msg = f"Invalid input file: {input_path or '(none)'}"
        logger.error(msg)
        return create_error_result(msg, input_path)

    logger.info(f"Analyzing profiler export: {input_path}")
    token = session.begin() if session is not None else 0

    try:
        rows = read_rows(input_path)
    except CsvDecodeError as e:
        logger.error(f"Error parsing CSV: {e}")
        return create_error_result(str(e), input_path)

    recent_name = ""
    if cfg.get("remember_recent"):
        recent_name = _remember(recent_store or RecentFileStore(), input_path)

    build = analyze_rows(rows)
    if session is not None and not session.commit(token, build.tree, source=input_path):
        msg = "Analysis superseded by a newer run."
        logger.info(f"{msg} Discarding result for {input_path}")
        return create_error_result(msg, input_path, {"superseded": True})

    state = filter_state_from_config(cfg)
    report = compute_category_stats(build.tree)
    lines = render_hierarchy(build.tree, state, max_depth=cfg.get("max_depth", 0))

    return create_success_result(
        input_path=input_path,
        build=build,
        stats=report.to_dict(),
        tree_lines=lines,
        summary_extra={
            "warnings": warnings,
            "recent_name": recent_name,
            "visible_lines": len(lines),
            "filters": {
                "min_size": state.min_size,
                "categories": sorted(c.value for c in state.active_categories),
                "search_term": state.search_term,
            },
        },
    )


def _remember(store: RecentFileStore, path: str) -> str:
    """Save the input as a recent file; failures never abort the analysis."""
    try:
        return store.store(path)
    except OSError as e:
        logger.error(f"Error saving recent file: {e}")
        return ""
