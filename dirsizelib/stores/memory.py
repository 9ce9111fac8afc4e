"""
In-process CacheMap store backed by cachetools.

Maps are kept per namespace in an LRU bounded by namespace count, or in a
TTL cache when whole maps should expire after a fixed lifetime.
"""

from typing import Any, Dict, Optional

from cachetools import LRUCache, TTLCache

from .base import CacheMap, CacheStore


class MemoryCacheStore(CacheStore):
    """
    CacheStore holding maps in process memory.

    Example:
        store = MemoryCacheStore(max_namespaces=64)
        cache = DirsizeCache("/srv/uploads", store=store)
    """

    def __init__(self, max_namespaces: int = 1024, ttl: Optional[float] = None):
        """
        Initialize the memory store.

        Args:
            max_namespaces: Maximum number of namespace maps kept at once
            ttl: Lifetime of a stored map in seconds (None = no expiry)
        """
        if ttl is None:
            self._maps = LRUCache(maxsize=max_namespaces)
        else:
            self._maps = TTLCache(maxsize=max_namespaces, ttl=ttl)
        self.ttl = ttl

        # Statistics
        self.reads = 0
        self.writes = 0

    def read(self, namespace: str) -> CacheMap:
        self.reads += 1
        stored = self._maps.get(namespace)
        return dict(stored) if stored is not None else {}

    def write(self, namespace: str, cache_map: CacheMap) -> None:
        self.writes += 1
        self._maps[namespace] = dict(cache_map)

    def delete(self, namespace: str) -> None:
        self._maps.pop(namespace, None)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get store statistics.

        Returns:
            Dictionary with namespace, read and write counts
        """
        return {
            'namespaces': len(self._maps),
            'reads': self.reads,
            'writes': self.writes,
        }
