from __future__ import annotations

"""
Instantiation Collapser.

Folds the compiler-generated variants of a symbol (anonymous structs and
closures numbered by the compiler) into one canonical record per base name.
"""

import logging
from typing import Dict, Iterable, List, Sequence

from symbolanalyzer.domain.constants import ROW_SUFFIX_PATTERNS
from symbolanalyzer.domain.tree_models import SymbolRecord

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def strip_suffixes(name: str, patterns: Sequence) -> str:
    """
    Remove trailing disambiguation suffixes until none of the patterns match.

    Args:
        name: Symbol or segment name.
        patterns: Compiled suffix regexes, tried in order on every round.

    Returns:
        str: The name without any recognized trailing suffix.
    """
    previous = None
    while previous != name:
        previous = name
        for rx in patterns:
            name = rx.sub("", name)
    return name


def canonical_name(name: str) -> str:
    """Base name of a profiler row once all instantiation suffixes are gone."""
    return strip_suffixes(name, ROW_SUFFIX_PATTERNS)


def collapse_instantiations(records: Iterable[SymbolRecord]) -> List[SymbolRecord]:
    """
    Merge records that share a canonical name.

    Sizes are summed. A merged record counts every represented row: each
    row contributes its own instantiation counter plus one. A record that
    absorbed nothing keeps its original counter. Records whose canonical
    name is empty are dropped. First-seen order is preserved.

    Args:
        records: Normalized records, usually sorted by size.

    Returns:
        List[SymbolRecord]: Deduplicated canonical records.
    """
    sizes: Dict[str, int] = {}
    counts: Dict[str, int] = {}
    members: Dict[str, int] = {}

    for record in records:
        name = canonical_name(record.qualified_name)
        if not name:
            logger.debug(f"Dropping symbol with empty canonical name: {record.qualified_name!r}")
            continue

        if name not in sizes:
            sizes[name] = record.size_bytes
            counts[name] = record.instantiation_count
            members[name] = 1
            continue

        if members[name] == 1:
            counts[name] += 1
        sizes[name] += record.size_bytes
        counts[name] += record.instantiation_count + 1
        members[name] += 1

    merged = sum(1 for n in members.values() if n > 1)
    if merged:
        logger.debug(f"Collapsed instantiations into {merged} canonical symbols.")

    return [
        SymbolRecord(qualified_name=name, size_bytes=sizes[name], instantiation_count=counts[name])
        for name in sizes
    ]
