from __future__ import annotations

import io
import json
import logging
from typing import Iterator

import pytest

from lrucache import LeastRecentlyUsedCache
from lrucache.core.logging.json_formatter import JSONFormatter


@pytest.fixture
def cache_log() -> Iterator[io.StringIO]:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())

    logger = logging.getLogger("lrucache.cache")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    try:
        yield stream
    finally:
        logger.handlers = []
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def test_eviction_is_logged_with_key_and_cache_name(cache_log: io.StringIO) -> None:
    cache: LeastRecentlyUsedCache[int, str] = LeastRecentlyUsedCache(10, name="users")
    for key in range(11):
        cache.put(key, str(key))

    lines = [json.loads(line) for line in cache_log.getvalue().splitlines()]
    evictions = [line for line in lines if line["msg"] == "evicted least recently used entry"]
    assert len(evictions) == 1
    assert evictions[0]["evicted_key"] == "0"
    assert evictions[0]["cache_name"] == "users"
    assert evictions[0]["capacity"] == 10


def test_capacity_floor_is_logged(cache_log: io.StringIO) -> None:
    LeastRecentlyUsedCache(2)

    payload = json.loads(cache_log.getvalue().strip())
    assert payload["msg"] == "capacity raised to floor"
    assert payload["requested_capacity"] == 2
    assert payload["capacity"] == 10


def test_get_path_logs_nothing(cache_log: io.StringIO) -> None:
    cache: LeastRecentlyUsedCache[int, int] = LeastRecentlyUsedCache(10)
    cache.put(1, 1)
    cache.get(1)
    cache.get(2)

    assert cache_log.getvalue() == ""
