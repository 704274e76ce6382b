from __future__ import annotations

"""
Logging Configuration Model.

Immutable description of how the logging subsystem should be initialized,
plus the mapping from textual level names to logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Minimum severity captured ('DEBUG', 'INFO', ...).
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size threshold before the file rotates.
        backup_count: Number of rotated files kept.
        console_fmt: Format of terminal records.
        file_fmt: Format of file records.
        datefmt: Timestamp format of file records.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


def parse_level(level: Optional[str]) -> int:
    """Numeric level for a textual name (INFO when unknown)."""
    if not level:
        return logging.INFO
    return LEVELS.get(str(level).strip().upper(), logging.INFO)
