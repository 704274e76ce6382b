from __future__ import annotations

"""
Row Normalizer.

First stage of the pipeline. Validates the untrusted rows decoded from a
profiler export and orders them by size. Malformed rows are excluded
silently; normalization never fails.
"""

import logging
import math
from numbers import Real
from typing import Any, Iterable, List, Mapping

from symbolanalyzer.domain.constants import (
    COLUMN_INSTANTIATIONS,
    COLUMN_SIZE,
    COLUMN_SYMBOL,
)
from symbolanalyzer.domain.tree_models import SymbolRecord

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_rows(rows: Iterable[Any]) -> List[SymbolRecord]:
    """
    Filter and order raw profiler rows.

    A row is kept when its symbol name is a non-empty string and its size
    is either absent/zero-like or a finite, non-negative number. Kept rows
    are sorted by size descending, ties broken by ascending symbol name.

    Args:
        rows: Decoded rows shaped like {symbols, vmsize, instantiations}.

    Returns:
        List[SymbolRecord]: Ordered records, one per accepted row.
    """
    records: List[SymbolRecord] = []
    dropped = 0

    for row in rows:
        if not _is_valid_row(row):
            dropped += 1
            continue
        records.append(
            SymbolRecord(
                qualified_name=row[COLUMN_SYMBOL],
                size_bytes=_as_int(row.get(COLUMN_SIZE)),
                instantiation_count=_as_int(row.get(COLUMN_INSTANTIATIONS)),
            )
        )

    if dropped:
        logger.debug(f"Normalizer discarded {dropped} malformed rows.")

    records.sort(key=lambda r: (-r.size_bytes, r.qualified_name))
    return records

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_valid_row(row: Any) -> bool:
    """Apply the acceptance rules to one decoded row."""
    if not isinstance(row, Mapping):
        return False

    name = row.get(COLUMN_SYMBOL)
    if not name or not isinstance(name, str):
        return False

    # Zero-like sizes are accepted as empty leaves
    size = row.get(COLUMN_SIZE)
    if not size:
        return True
    return _is_number(size) and size >= 0


def _is_number(value: Any) -> bool:
    """Finite real number; bools, NaN and infinities are rejected."""
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    return math.isfinite(value)


def _as_int(value: Any) -> int:
    """Coerce an optional numeric cell into a non-negative integer (otherwise 0)."""
    if not value or not _is_number(value):
        return 0
    return max(int(value), 0)
