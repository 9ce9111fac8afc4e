"""High-level API for DirSizeLib.

``DirsizeCache`` is the namespace handle callers open once per upload root:
it owns the store handle and wires the calculator and invalidator to the
same namespace, root and adapter. The module-level functions wrap it for
the common one-call cases.
"""

import logging
import os
from typing import Iterable, Optional, Union

from .._common.config import CacheBackend, DirsizeConfig
from .._common.keys import normalize_path
from ..errors import ConfigurationError
from ..hooks import HookLike
from ..stores.base import CacheMap, CacheStore
from ..stores.disk import DiskCacheStore
from ..stores.memory import MemoryCacheStore
from .adapters.filesystem import FileSystemAdapter
from .calculator import DirsizeCalculator
from .core.adapter import TreeAdapter
from .invalidator import CacheInvalidator

logger = logging.getLogger(__name__)


class DirsizeCache:
    """Size cache for one namespace root.

    Example:
        with DirsizeCache("/srv/uploads") as cache:
            used = cache.size("/srv/uploads/site-3")
            ...
            # after writing /srv/uploads/site-3/2024/photo.jpg
            cache.invalidate("/srv/uploads/site-3/2024/photo.jpg")
    """

    def __init__(self,
                 namespace_root: str,
                 store: Optional[CacheStore] = None,
                 namespace: Optional[str] = None,
                 adapter: Optional[TreeAdapter] = None,
                 hook: HookLike = None,
                 exclude: Union[str, Iterable[str], None] = None,
                 max_execution_time: Optional[float] = None):
        """Open a size cache namespace.

        Args:
            namespace_root: Absolute base path all cache keys are relative to
            store: CacheStore for the namespace map (default: MemoryCacheStore)
            namespace: Store scope (defaults to the normalized root)
            adapter: TreeAdapter for filesystem access (default: FileSystemAdapter)
            hook: Optional size override
            exclude: Directory path(s) treated as absent when sizing
            max_execution_time: Seconds before a cold computation gives up
        """
        self.namespace_root = normalize_path(namespace_root)
        self.namespace = namespace or self.namespace_root
        self.store = store if store is not None else MemoryCacheStore()
        self.adapter = adapter or FileSystemAdapter()

        self.calculator = DirsizeCalculator(
            self.namespace_root,
            self.store,
            namespace=self.namespace,
            adapter=self.adapter,
            hook=hook,
            exclude=exclude,
            max_execution_time=max_execution_time,
        )
        self.invalidator = CacheInvalidator(
            self.namespace_root,
            self.store,
            namespace=self.namespace,
            adapter=self.adapter,
        )

    @classmethod
    def from_config(cls,
                    config: DirsizeConfig,
                    hook: HookLike = None,
                    adapter: Optional[TreeAdapter] = None) -> 'DirsizeCache':
        """Build a cache from a validated DirsizeConfig.

        Raises:
            ConfigurationError: If the config does not validate
        """
        errors = config.validate()
        if errors:
            raise ConfigurationError(errors)

        if config.cache_backend == CacheBackend.DISK:
            store = DiskCacheStore(config.cache_dir, ttl_seconds=config.cache_ttl)
        elif config.cache_backend == CacheBackend.CUSTOM:
            store = config.custom_store
        else:
            store = MemoryCacheStore(ttl=config.cache_ttl)

        if adapter is None:
            adapter = FileSystemAdapter(
                follow_symlinks=config.follow_symlinks,
                include_hidden=config.include_hidden,
            )

        return cls(
            config.namespace_root,
            store=store,
            namespace=config.namespace,
            adapter=adapter,
            hook=hook,
            exclude=config.exclude,
            max_execution_time=config.max_execution_time,
        )

    def size(self, path: Optional[str] = None) -> Optional[int]:
        """Total size of ``path`` (default: the namespace root), None if absent."""
        return self.calculator.size(path if path is not None else self.namespace_root)

    def invalidate(self, path: str) -> None:
        """Invalidate cached sizes after ``path`` was written or deleted."""
        self.invalidator.invalidate(path)

    def snapshot(self) -> CacheMap:
        """Copy of the namespace's current CacheMap."""
        return self.store.read(self.namespace)

    def clear(self) -> None:
        """Drop the whole namespace map (external full clear)."""
        logger.debug("Clearing size cache namespace %s", self.namespace)
        self.store.delete(self.namespace)

    def close(self) -> None:
        self.store.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"DirsizeCache(namespace_root={self.namespace_root!r}, store={type(self.store).__name__})"


def get_dirsize(cache: DirsizeCache, path: Union[str, "os.PathLike[str]"]) -> Optional[int]:
    """Simple interface for a size query.

    Args:
        cache: Open DirsizeCache for the namespace containing ``path``
        path: Directory to size

    Returns:
        Size in bytes, or None if the directory does not exist

    Example:
        >>> cache = DirsizeCache("/srv/uploads")
        >>> get_dirsize(cache, "/srv/uploads/site-3")
        1048576
    """
    return cache.size(os.fspath(path))


def clean_dirsize_cache(cache: DirsizeCache, path: Union[str, "os.PathLike[str]"]) -> None:
    """Invalidate cached sizes after a write to ``path``.

    Works with a file path (uploaded or deleted) or a directory path.
    """
    cache.invalidate(os.fspath(path))
