"""Ancestor-walking invalidation of cached directory sizes.

When a file is written or deleted, the cached totals of its directory and of
every ancestor below the namespace root become stale. Removing exactly that
chain is enough: the next size query misses on the first stale ancestor and
re-walks downward until it reaches the untouched, still-cached siblings.

Descendants are never removed. When a deleted directory is invalidated only
its own key and its ancestors go; the keys of its former subdirectories stay
in the map. If a directory of the same name is created later and nothing
below it is ever invalidated, those old totals are read again. This is
accepted behaviour, like the undercount described in ``calculator``.
"""

import logging
from typing import Optional

from .._common.keys import iter_ancestor_keys, normalize_path
from ..errors import CacheStoreError
from ..stores.base import CacheStore
from .adapters.filesystem import FileSystemAdapter
from .core.adapter import TreeAdapter

logger = logging.getLogger(__name__)


class CacheInvalidator:
    """Removes the cache entries of a modified path's directory chain.

    Example:
        invalidator = CacheInvalidator("/srv/uploads", store)
        invalidator.invalidate("/srv/uploads/2/1/file.dummy")
        # removes "2/1" and "2", never the root
    """

    def __init__(self,
                 namespace_root: str,
                 store: CacheStore,
                 namespace: Optional[str] = None,
                 adapter: Optional[TreeAdapter] = None):
        """Initialize the invalidator.

        Args:
            namespace_root: Absolute base path all cache keys are relative to
            store: CacheStore holding the namespace's CacheMap
            namespace: Store scope (defaults to the normalized root)
            adapter: TreeAdapter used to tell files from directories
        """
        self.namespace_root = normalize_path(namespace_root)
        self.namespace = namespace or self.namespace_root
        self.store = store
        self.adapter = adapter or FileSystemAdapter()

    def invalidate(self, path: str) -> None:
        """Drop cached sizes for ``path``'s directory and its ancestors.

        Args:
            path: File or directory that was just modified. It may no longer
                exist (e.g. a deleted file), in which case the walk starts at
                its parent and the path's own key is dropped as well.
        """
        path = normalize_path(path)
        start = self._start_directory(path)
        if start is None:
            return

        keys = list(iter_ancestor_keys(self.namespace_root, start))
        if start != path and not self.adapter.exists(path):
            # A deleted directory must not keep its own stale total
            keys[:0] = list(iter_ancestor_keys(self.namespace_root, path))[:1]

        try:
            cache_map = self.store.read(self.namespace)
        except CacheStoreError as e:
            logger.warning("%s; nothing invalidated", e)
            return

        removed = [key for key in keys if cache_map.pop(key, None) is not None]
        if not removed:
            return

        try:
            self.store.write(self.namespace, cache_map)
        except CacheStoreError as e:
            logger.warning("%s; stale sizes may remain for %s", e, start)
            return
        logger.debug("Invalidated %d cache entries for %s: %s", len(removed), path, removed)

    def _start_directory(self, path: str) -> Optional[str]:
        """The path itself if it is a directory, else its parent."""
        if self.adapter.exists(path) and self.adapter.is_directory(path):
            return path
        return self.adapter.get_parent(path)
