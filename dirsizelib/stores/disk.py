"""
DiskCache-based CacheMap store.

A filesystem-backed store using the diskcache library so that directory
size maps survive process restarts and can be shared by several worker
processes on the same host.

Key Benefits:
- Persisted maps (SQLite backend)
- Safe for concurrent readers and writers across processes
- Optional expiry of whole maps
- Context manager support for proper cleanup
"""

import sqlite3
from pathlib import Path
from typing import Optional, Union

import diskcache

from ..errors import CacheStoreError
from .base import CacheMap, CacheStore

_STORE_ERRORS = (OSError, sqlite3.Error, diskcache.Timeout)


class DiskCacheStore(CacheStore):
    """
    Persisted CacheStore using diskcache.

    Each namespace is one diskcache entry holding the whole CacheMap, so a
    read or write of a namespace is a single atomic SQLite transaction.
    """

    def __init__(
        self,
        cache_dir: Union[str, Path],
        ttl_seconds: Optional[float] = None,
    ) -> None:
        """
        Initialize DiskCacheStore.

        Args:
            cache_dir: Directory for cache storage
            ttl_seconds: Lifetime of a stored map (None = no expiry)
        """
        self._cache_dir = Path(cache_dir)
        self._cache_dir.mkdir(parents=True, exist_ok=True)
        self._ttl_seconds = ttl_seconds
        self._cache = diskcache.Cache(directory=str(self._cache_dir))

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    def close(self) -> None:
        """Close the cache and cleanup resources."""
        if hasattr(self, "_cache"):
            self._cache.close()

    def _get_map_key(self, namespace: str) -> str:
        """Get cache key for a namespace map."""
        return f"dirsize:{namespace}"

    def read(self, namespace: str) -> CacheMap:
        try:
            stored = self._cache.get(self._get_map_key(namespace))
        except _STORE_ERRORS as e:
            raise CacheStoreError(namespace, "read", e) from e
        if not isinstance(stored, dict):
            return {}
        return dict(stored)

    def write(self, namespace: str, cache_map: CacheMap) -> None:
        try:
            self._cache.set(
                self._get_map_key(namespace),
                dict(cache_map),
                expire=self._ttl_seconds,
            )
        except _STORE_ERRORS as e:
            raise CacheStoreError(namespace, "write", e) from e

    def delete(self, namespace: str) -> None:
        try:
            self._cache.delete(self._get_map_key(namespace))
        except _STORE_ERRORS as e:
            raise CacheStoreError(namespace, "delete", e) from e
