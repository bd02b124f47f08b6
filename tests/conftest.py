from __future__ import annotations

import logging
import os
from typing import Iterator

import pytest

from lrucache import LeastRecentlyUsedCache


@pytest.fixture(autouse=True)
def clear_lrucache_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("LRUCACHE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_lrucache_logger() -> Iterator[None]:
    logger = logging.getLogger("lrucache")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def full_cache() -> LeastRecentlyUsedCache[int, str]:
    cache: LeastRecentlyUsedCache[int, str] = LeastRecentlyUsedCache(10)
    for key in range(1, 11):
        cache.put(key, "abcdefghij"[key - 1])
    return cache
