"""CacheMap storage backends for DirSizeLib."""

from .base import CacheMap, CacheStore
from .disk import DiskCacheStore
from .memory import MemoryCacheStore

__all__ = [
    'CacheMap',
    'CacheStore',
    'DiskCacheStore',
    'MemoryCacheStore',
]
