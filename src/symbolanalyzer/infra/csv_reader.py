from __future__ import annotations

"""
Profiler CSV Decoder.

Boundary between the filesystem and the analysis pipeline. Reads the CSV
export produced by the size profiler and converts every cell to its
natural Python type so that the normalizer receives typed rows.
"""

import csv
import io
import logging
import os
import re
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

_INT_RX = re.compile(r"^[-+]?\d+$")
_FLOAT_RX = re.compile(r"^[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?$")


class CsvDecodeError(ValueError):
    """Raised when an input file cannot be decoded into rows."""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_rows(path: str) -> List[Dict[str, Any]]:
    """
    Decode a profiler CSV file.

    Args:
        path: Location of the CSV export.

    Returns:
        List[Dict[str, Any]]: One typed mapping per data line.

    Raises:
        CsvDecodeError: If the file is unreadable or not valid CSV.
    """
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CsvDecodeError(f"Cannot read '{os.path.basename(path)}': {e}") from e

    return decode_rows(text)


def decode_rows(text: str) -> List[Dict[str, Any]]:
    """
    Decode CSV text whose first line is the header.

    Lines that are empty or contain only whitespace and separators are
    skipped. Missing trailing cells decode as None.

    Args:
        text: Raw CSV content.

    Returns:
        List[Dict[str, Any]]: One typed mapping per data line.

    Raises:
        CsvDecodeError: If the content has no header or is malformed.
    """
    reader = csv.reader(io.StringIO(text))
    try:
        records = [r for r in reader if not _is_blank(r)]
    except csv.Error as e:
        raise CsvDecodeError(f"Malformed CSV at line {reader.line_num}: {e}") from e

    if not records:
        raise CsvDecodeError("CSV input is empty.")

    header = [h.strip() for h in records[0]]
    rows: List[Dict[str, Any]] = []
    for record in records[1:]:
        row = {name: None for name in header}
        for name, cell in zip(header, record):
            row[name] = convert_cell(cell)
        rows.append(row)

    logger.debug(f"Decoded {len(rows)} CSV rows with columns {header}.")
    return rows


def convert_cell(cell: Optional[str]) -> Any:
    """
    Convert one raw cell: integers, floats, booleans, empty -> None.

    Everything else is returned unchanged as a string.
    """
    if cell is None:
        return None
    stripped = cell.strip()
    if stripped == "":
        return None
    if _INT_RX.match(stripped):
        return int(stripped)
    if _FLOAT_RX.match(stripped):
        return float(stripped)
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return cell

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_blank(record: List[str]) -> bool:
    return all(not cell.strip() for cell in record)
