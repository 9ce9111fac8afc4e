"""Cache-aware directory size calculator.

The cached value of a directory is the sum of its immediate file sizes plus
the (possibly cached) totals of its subdirectories, so the CacheMap is a
memoization of a tree-shaped recurrence. A cold lookup walks down only as
far as the first cache hit on every branch and writes every directory it
completes back to the map.

Result contract:
    int   - total size in bytes (0 for an empty directory)
    None  - absent: path missing, not a directory, unreadable, excluded,
            or the computation ran past ``max_execution_time``

``None`` is never stored. A subdirectory that yields ``None`` mid-walk (for
example because it was deleted concurrently) contributes zero to its parent;
the parent total then undercounts until the next invalidation. This is
accepted behaviour.
"""

import logging
import time
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .._common.keys import ROOT_KEY, is_within, normalize_key, normalize_path
from ..errors import CacheStoreError
from ..hooks import HookLike, as_hook
from ..stores.base import CacheMap, CacheStore
from .adapters.filesystem import FileSystemAdapter
from .core.adapter import TreeAdapter
from .core.node import DirEntry, EntryKind

logger = logging.getLogger(__name__)


class _Frame:
    """A directory whose children are still being summed."""

    __slots__ = ('path', 'key', 'children', 'total')

    def __init__(self, path: str, key: Optional[str], children: List[DirEntry]):
        self.path = path
        self.key = key
        self.children: Iterator[DirEntry] = iter(children)
        self.total = 0


class DirsizeCalculator:
    """Computes directory sizes through a namespace-scoped CacheMap.

    Example:
        calculator = DirsizeCalculator("/srv/uploads", MemoryCacheStore())
        calculator.size("/srv/uploads/2024")   # cold: walks and caches
        calculator.size("/srv/uploads/2024")   # warm: no filesystem access
    """

    def __init__(self,
                 namespace_root: str,
                 store: CacheStore,
                 namespace: Optional[str] = None,
                 adapter: Optional[TreeAdapter] = None,
                 hook: HookLike = None,
                 exclude: Union[str, Iterable[str], None] = None,
                 max_execution_time: Optional[float] = None):
        """Initialize the calculator.

        Args:
            namespace_root: Absolute base path all cache keys are relative to
            store: CacheStore holding the namespace's CacheMap
            namespace: Store scope (defaults to the normalized root)
            adapter: TreeAdapter used to list directories
            hook: Size override consulted before each lookup
            exclude: Directory path(s) treated as absent
            max_execution_time: Seconds before a cold computation gives up
        """
        self.namespace_root = normalize_path(namespace_root)
        self.namespace = namespace or self.namespace_root
        self.store = store
        self.adapter = adapter or FileSystemAdapter()
        self.hook = as_hook(hook)
        self.max_execution_time = max_execution_time

        if isinstance(exclude, str):
            exclude = [exclude]
        self.exclude = {normalize_path(p) for p in exclude or ()}

    def size(self, path: str) -> Optional[int]:
        """Return the total size of the directory at ``path``.

        Args:
            path: Absolute directory path inside the namespace

        Returns:
            Size in bytes, or None if the directory is absent
        """
        directory = normalize_path(path)

        hooked = self.hook.evaluate(directory)
        if hooked is not None:
            logger.debug("Size override for %s: %d", directory, hooked)
            return hooked

        cache_map = self._read_cache()
        total, stored = self._compute(directory, cache_map)

        if stored:
            self._write_cache(cache_map)
        return total

    def _compute(self, directory: str, cache_map: CacheMap) -> Tuple[Optional[int], int]:
        """Walk ``directory`` with an explicit stack, filling ``cache_map``.

        Returns:
            Tuple of (total or None, number of entries memoized)
        """
        deadline = None
        if self.max_execution_time is not None:
            deadline = time.monotonic() + self.max_execution_time

        first = self._enter(directory, cache_map, consult_hook=False)
        if not isinstance(first, _Frame):
            return first, 0

        stored = 0
        stack = [first]
        while stack:
            if deadline is not None and time.monotonic() > deadline:
                logger.warning(
                    "Size computation of %s exceeded %.1fs, giving up",
                    directory, self.max_execution_time
                )
                return None, stored

            frame = stack[-1]
            entry = next(frame.children, None)

            if entry is None:
                # All children summed: memoize and hand the total upward
                stack.pop()
                if frame.key is not None:
                    cache_map[frame.key] = frame.total
                    stored += 1
                logger.debug("Computed %s: %d bytes", frame.path, frame.total)
                if not stack:
                    return frame.total, stored
                stack[-1].total += frame.total
                continue

            if entry.kind is EntryKind.FILE:
                frame.total += entry.size
            elif entry.kind is EntryKind.DIRECTORY:
                child = self._enter(entry.path, cache_map)
                if isinstance(child, _Frame):
                    stack.append(child)
                elif child:
                    frame.total += child
            # EntryKind.OTHER contributes nothing

        return None, stored

    def _enter(self, path: str, cache_map: CacheMap,
               consult_hook: bool = True) -> Union[int, None, _Frame]:
        """Resolve a directory from hook or cache, or open it for walking."""
        path = normalize_path(path)

        if consult_hook:
            hooked = self.hook.evaluate(path)
            if hooked is not None:
                return hooked

        key = self._cache_key(path)
        if key is not None:
            cached = cache_map.get(key)
            if isinstance(cached, int):
                logger.debug("Cache hit for %s", key)
                return cached

        if (not self.adapter.exists(path)
                or not self.adapter.is_directory(path)
                or not self.adapter.is_readable(path)):
            return None

        if path in self.exclude:
            return None

        try:
            children = self.adapter.list_children(path)
        except OSError as e:
            # Vanished or became unreadable since the checks above
            logger.debug("Cannot list %s: %s", path, e)
            return None

        return _Frame(path, key, children)

    def _cache_key(self, path: str) -> Optional[str]:
        """Key for ``path``, or None if it must not be memoized.

        The namespace root is never a key: the invalidator stops below it,
        so a memoized root total could never be invalidated.
        """
        if not is_within(self.namespace_root, path):
            return None
        key = normalize_key(self.namespace_root, path)
        return None if key == ROOT_KEY else key

    def _read_cache(self) -> CacheMap:
        try:
            return self.store.read(self.namespace)
        except CacheStoreError as e:
            logger.warning("%s; treating as cache miss", e)
            return {}

    def _write_cache(self, cache_map: CacheMap) -> None:
        try:
            self.store.write(self.namespace, cache_map)
        except CacheStoreError as e:
            logger.warning("%s; computed sizes not memoized", e)
