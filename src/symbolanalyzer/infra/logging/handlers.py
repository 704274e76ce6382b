from __future__ import annotations

"""
Logging Handler Factories.

Creates the concrete sinks used by the queue listener and tags them so
that reconfiguration only removes handlers installed by this package.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

HANDLER_TAG_ATTR: str = "_symbolanalyzer_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, HANDLER_TAG_ATTR, True)
    return handler


def is_own_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, HANDLER_TAG_ATTR, False))


def create_console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    """stderr sink, so that stdout stays reserved for reports."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return tag_handler(handler)


def create_file_handler(
        log_file: str,
        level: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Rotating file sink.

    Returns:
        Optional[RotatingFileHandler]: None if the file cannot be opened;
        the failure is reported on stderr and logging continues without it.
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(formatter)
    tag_handler(handler)
    return handler
