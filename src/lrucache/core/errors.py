from __future__ import annotations

from pathlib import Path


class LRUCacheError(RuntimeError):
    """Base error for lrucache support layers."""


class LRUCacheConfigError(LRUCacheError):
    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
