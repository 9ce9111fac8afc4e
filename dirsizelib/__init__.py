"""DirSizeLib - Memoized directory size computation.

DirSizeLib computes the total byte size of a directory tree and memoizes
per-directory totals in a namespace-scoped cache, so repeated size queries
(e.g. quota checks) avoid re-scanning the filesystem. After a write, only
the modified directory and its ancestors are invalidated.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from dirsizelib.sync import DirsizeCache

Asynchronous:
    from dirsizelib.aio import get_dirsize_async
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Re-export submodules for convenient access
from . import sync
from . import aio

from ._common import CacheBackend, DirsizeConfig, normalize_key
from .errors import CacheStoreError, ConfigurationError, DirsizeError
from .hooks import CallableSizeHook, HookPipeline, SizeOverrideHook
from .stores import CacheStore, DiskCacheStore, MemoryCacheStore
from .sync import DirsizeCache, clean_dirsize_cache, get_dirsize

__all__ = [
    "__version__",
    "sync",
    "aio",
    "CacheBackend",
    "DirsizeConfig",
    "normalize_key",
    "CacheStoreError",
    "ConfigurationError",
    "DirsizeError",
    "CallableSizeHook",
    "HookPipeline",
    "SizeOverrideHook",
    "CacheStore",
    "DiskCacheStore",
    "MemoryCacheStore",
    "DirsizeCache",
    "clean_dirsize_cache",
    "get_dirsize",
]
