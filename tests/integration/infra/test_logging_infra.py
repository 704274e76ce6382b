from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
teardown of package handlers and log file rotation.
"""

import logging
from logging.handlers import QueueHandler
from pathlib import Path

import pytest

from symbolanalyzer.infra.logging import (
    CONFIGURED_FLAG_ATTR,
    HANDLER_TAG_ATTR,
    QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    parse_level,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by the package before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _own_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, HANDLER_TAG_ATTR, False)]


def test_logging_idempotency():
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    first = _own_handlers()
    configure_logging(cfg)

    assert _own_handlers() == first
    assert len(first) == 1


def test_force_replaces_configuration():
    configure_logging(LoggingConfig(level="INFO"))
    old_listener = getattr(logging.getLogger(), QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    assert len(_own_handlers()) == 1
    assert getattr(root, QUEUE_LISTENER_ATTR) is not old_listener
    assert root.level == logging.DEBUG


def test_queue_listener_architecture():
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    handlers = _own_handlers()

    assert isinstance(handlers[0], QueueHandler)
    assert getattr(root, QUEUE_LISTENER_ATTR) is not None
    assert getattr(root, CONFIGURED_FLAG_ATTR) is True


def test_shutdown_detaches_package_handlers():
    configure_logging(LoggingConfig(level="INFO"))

    shutdown_logging()

    root = logging.getLogger()
    assert _own_handlers() == []
    assert getattr(root, QUEUE_LISTENER_ATTR) is None
    assert getattr(root, CONFIGURED_FLAG_ATTR) is False


def test_records_reach_the_log_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(log_file)))

    logging.getLogger("symbolanalyzer.test").info("hierarchy ready")
    logging.getLogger("symbolanalyzer.test").debug("hidden detail")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "hierarchy ready" in content
    assert "hidden detail" not in content


def test_log_rotation(tmp_path: Path):
    log_file = tmp_path / "rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("symbolanalyzer.rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "rotate.log.1").exists()


def test_no_sinks_installs_nothing():
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _own_handlers() == []


@pytest.mark.parametrize(
    "text, level",
    [("debug", logging.DEBUG), ("WARN", logging.WARNING), ("bogus", logging.INFO), (None, logging.INFO)],
)
def test_parse_level(text, level):
    assert parse_level(text) == level


def test_default_log_path_is_inside_data_dir(isolated_data_dir: Path):
    assert Path(get_default_log_path()) == isolated_data_dir / "logs" / "symbolanalyzer.log"
