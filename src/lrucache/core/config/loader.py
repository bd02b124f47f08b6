"""Configuration loader for lrucache instances."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from lrucache.core.cache.lru import MIN_CAPACITY, LeastRecentlyUsedCache
from lrucache.core.errors import LRUCacheConfigError


class CacheSettings(BaseModel):
    name: str = "default"
    capacity: int = MIN_CAPACITY


class LoggingConfig(BaseModel):
    level: str = "INFO"
    to_file: bool = False
    log_dir: Optional[str] = None


class LRUCacheConfig(BaseModel):
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise LRUCacheConfigError(f"cannot read config file: {exc}", path=path) from exc
    except yaml.YAMLError as exc:
        raise LRUCacheConfigError(f"invalid YAML in config file: {exc}", path=path) from exc
    if not isinstance(data, dict):
        raise LRUCacheConfigError("config file must contain a mapping", path=path)
    return data


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    cache = dict(data.get("cache") or {})
    capacity = os.getenv("LRUCACHE_CAPACITY")
    if capacity is not None and capacity.strip():
        cache["capacity"] = capacity.strip()
    name = os.getenv("LRUCACHE_NAME")
    if name is not None and name.strip():
        cache["name"] = name.strip()
    merged = dict(data)
    merged["cache"] = cache
    return merged


def load_config(path: Optional[str | Path] = None) -> LRUCacheConfig:
    """Load and validate configuration, then apply ``LRUCACHE_*`` overrides."""
    raw_path = path or os.getenv("LRUCACHE_CONFIG")
    cfg_path = Path(raw_path).expanduser() if raw_path else None
    data = _read_yaml(cfg_path) if cfg_path is not None else {}
    try:
        return LRUCacheConfig.model_validate(_apply_env_overrides(data))
    except ValidationError as exc:
        raise LRUCacheConfigError(f"invalid cache configuration: {exc}", path=cfg_path) from exc


def build_cache(config: Optional[LRUCacheConfig] = None) -> LeastRecentlyUsedCache[Any, Any]:
    cfg = config or load_config()
    return LeastRecentlyUsedCache(cfg.cache.capacity, name=cfg.cache.name)
