from __future__ import annotations

"""
Logging Core.

Idempotent setup of the root logger. Records go through a single
QueueHandler; a QueueListener thread drains the queue into the console
and file sinks so that file I/O never blocks the analysis.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from symbolanalyzer.infra.fs import get_user_data_dir
from symbolanalyzer.infra.logging.config import LoggingConfig, parse_level
from symbolanalyzer.infra.logging.handlers import (
    create_console_handler,
    create_file_handler,
    is_own_handler,
    tag_handler,
)

CONFIGURED_FLAG_ATTR: str = "_symbolanalyzer_configured"
QUEUE_LISTENER_ATTR: str = "_symbolanalyzer_queue_listener"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = "symbolanalyzer.log") -> str:
    """Location of the persistent log file inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once.

    Args:
        cfg: Logging configuration.
        force: Replace an existing configuration made by this function.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level = parse_level(cfg.level)
    root.setLevel(level)
    _teardown(root)

    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(create_console_handler(level, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        fh = create_file_handler(
            cfg.log_file,
            level,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh is not None:
            sinks.append(fh)

    if not sinks:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(tag_handler(QueueHandler(log_queue)))
    setattr(root, QUEUE_LISTENER_ATTR, listener)
    setattr(root, CONFIGURED_FLAG_ATTR, True)
    atexit.register(stop_listener, listener)

    return root


def shutdown_logging() -> None:
    """Flush pending records and detach every handler installed here."""
    root = logging.getLogger()
    _teardown(root)
    setattr(root, CONFIGURED_FLAG_ATTR, False)


def stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating listeners that were already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _teardown(root: logging.Logger) -> None:
    listener = getattr(root, QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        stop_listener(listener)
        for sink in listener.handlers:
            sink.close()
        setattr(root, QUEUE_LISTENER_ATTR, None)

    for handler in list(root.handlers):
        if is_own_handler(handler):
            root.removeHandler(handler)
            handler.close()
