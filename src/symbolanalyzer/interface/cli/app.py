from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
session configuration (defaults, stored session and command-line
overrides), input selection (file or recent entry), analysis and report
rendering.
"""

import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from symbolanalyzer.core.pipeline.engine import run_analysis
from symbolanalyzer.core.pipeline.validator import validate_config
from symbolanalyzer.domain.config import get_default_config, load_config, save_config
from symbolanalyzer.domain.pipeline_models import AnalysisResult
from symbolanalyzer.infra.logging import LoggingConfig, configure_logging, get_default_log_path
from symbolanalyzer.infra.recent_files import RecentFileStore
from symbolanalyzer.interface.cli import args as cli_args
from symbolanalyzer.utils.formatting import format_bytes
from symbolanalyzer.utils.i18n import i18n

logger = logging.getLogger(__name__)

_MERGE_KEYS = [
    "input_path", "min_size", "categories", "search_term",
    "max_depth", "show_stats", "remember_recent",
]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, recent_store: Optional[RecentFileStore] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments (defaults to sys.argv).
        recent_store: Store of previously opened files.

    Returns:
        int: Exit code (0 success, 1 failure, 2 missing input, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_file = None
    if args.log_file is not None:
        log_file = args.log_file or get_default_log_path()
    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=log_file,
    ))
    logger.debug("CLI execution initiated.")

    store = recent_store or RecentFileStore()

    if args.list_recent:
        _print_recent(store)
        return 0

    # 1. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    if args.open_recent:
        try:
            raw_conf["input_path"] = store.retrieve(args.open_recent)
        except (FileNotFoundError, PermissionError) as e:
            msg = i18n.t("cli.errors.recent_unavailable", error=str(e))
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 2

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 2. Input verification
    input_path = clean_conf.get("input_path", "")
    if not input_path:
        print(f"ERROR: {i18n.t('cli.errors.missing_input')}", file=sys.stderr)
        return 2
    if not os.path.isfile(input_path):
        msg = i18n.t("cli.errors.path_not_exist", path=input_path)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    if args.save_config:
        save_config(clean_conf)

    # 3. Analysis
    try:
        result = run_analysis(clean_conf, recent_store=store)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    except Exception as e:
        msg = i18n.t("cli.errors.analysis_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 4. Output
    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, show_stats=clean_conf.get("show_stats", True))

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None override values over the base config."""
    out = dict(base)
    for k in _MERGE_KEYS:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_recent(store: RecentFileStore) -> None:
    names = store.list()
    if not names:
        print(i18n.t("cli.status.no_recent"))
        return
    print(i18n.t("cli.status.recent_header"))
    for name in names:
        print(f"  - {name}")


def _print_human_summary(result: AnalysisResult, show_stats: bool = True) -> None:
    """Print the statistics and the rendered tree of a result."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    summary = result.summary
    print(i18n.t(
        "cli.status.summary",
        records=result.record_count,
        rows=summary.get("rows_in", 0),
        total=format_bytes(summary.get("total_size", 0)),
    ))

    if show_stats and result.stats:
        print("")
        print(f"{'Category':<8} {'Size':>10}  {'Symbols':>7}  Share")
        for label, stat in result.stats.get("categories", {}).items():
            print(
                f"{label:<8} {format_bytes(stat['size']):>10}  "
                f"{stat['count']:>7}  {stat['percentage']:.1f}%"
            )

    print("")
    if result.tree_lines:
        print("\n".join(result.tree_lines))
    else:
        print(i18n.t("cli.status.no_match"))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
