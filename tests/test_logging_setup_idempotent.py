from __future__ import annotations

import logging

from lrucache.core.config.loader import LoggingConfig
from lrucache.core.logging.setup import configure_logging


def test_configure_logging_is_idempotent(tmp_path) -> None:
    logger = logging.getLogger("lrucache")
    logger.handlers = []

    configure_logging(tmp_path)
    first_count = len(logger.handlers)

    configure_logging(tmp_path)
    assert len(logger.handlers) == first_count == 1
    assert logger.propagate is False


def test_configure_logging_level_from_settings_and_env(tmp_path, monkeypatch) -> None:
    logger = logging.getLogger("lrucache")
    logger.handlers = []

    configure_logging(tmp_path, settings=LoggingConfig(level="debug"))
    assert logger.level == logging.DEBUG

    monkeypatch.setenv("LRUCACHE_LOG_LEVEL", "warning")
    configure_logging(tmp_path, settings=LoggingConfig(level="debug"))
    assert logger.level == logging.WARNING


def test_configure_logging_unknown_level_falls_back_to_info(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("LRUCACHE_LOG_LEVEL", "chatty")
    logger = logging.getLogger("lrucache")
    logger.handlers = []

    configure_logging(tmp_path)
    assert logger.level == logging.INFO
