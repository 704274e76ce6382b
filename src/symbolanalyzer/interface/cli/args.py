from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the analysis engine.
"""

import argparse
from typing import Any, Dict, List, Optional

from symbolanalyzer.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the symbolanalyzer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="symbolanalyzer",
        description=i18n.t("app.description"),
    )

    # --- Input Selection ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help=i18n.t("cli.args.input"),
    )
    p.add_argument(
        "--open-recent",
        dest="open_recent",
        metavar="NAME",
        default=None,
        help=i18n.t("cli.args.open_recent"),
    )
    p.add_argument(
        "--list-recent",
        action="store_true",
        help=i18n.t("cli.args.list_recent"),
    )
    p.add_argument(
        "--no-recent",
        action="store_true",
        help=i18n.t("cli.args.no_recent"),
    )

    # --- Filters ---
    p.add_argument(
        "--min-size",
        dest="min_size",
        type=int,
        default=None,
        help=i18n.t("cli.args.min_size"),
    )
    p.add_argument(
        "--category",
        dest="categories",
        default=None,
        help=i18n.t("cli.args.category"),
    )
    p.add_argument(
        "--search",
        dest="search_term",
        default=None,
        help=i18n.t("cli.args.search"),
    )

    # --- Report ---
    p.add_argument(
        "--depth",
        dest="max_depth",
        type=int,
        default=None,
        help=i18n.t("cli.args.depth"),
    )
    p.add_argument("--no-stats", action="store_true", help=i18n.t("cli.args.no_stats"))
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- Configuration and Diagnostics ---
    p.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save_config"))
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help=i18n.t("cli.args.log_file"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left unset map to None and do not override stored values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "min_size": args.min_size,
        "search_term": args.search_term,
        "max_depth": args.max_depth,
        "categories": _split_csv(args.categories),
    }

    if args.no_stats:
        overrides["show_stats"] = False
    if args.no_recent:
        overrides["remember_recent"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of trimmed items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
