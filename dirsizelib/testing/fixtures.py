"""Test fixtures for DirSizeLib consumers.

These fixtures provide controlled access to cache state for testing purposes
without reaching into store internals.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .._common.keys import is_within, normalize_key
from ..stores.base import CacheMap

# Tree spec: name -> bytes/str (file content) or nested mapping (directory)
TreeSpec = Mapping[str, Union[bytes, str, "TreeSpec"]]


class CacheTestHelper:
    """Public test fixture for cache verification.

    This class provides a stable testing interface for seeding and inspecting
    a DirsizeCache namespace. It's designed for use in test suites of
    projects that consume DirSizeLib.

    Example:
        cache = DirsizeCache(upload_root)
        testable = CacheTestHelper(cache)

        testable.seed({"2/1": 21, "2": 2})
        cache.invalidate(upload_root / "2" / "1" / "file.dummy")
        assert not testable.was_path_cached(upload_root / "2")
    """

    def __init__(self, cache):
        """Initialize with an open DirsizeCache.

        Args:
            cache: The DirsizeCache under test
        """
        self._cache = cache

    def seed(self, cache_map: Mapping[str, int]) -> None:
        """Replace the namespace map with ``cache_map`` (keys are relative)."""
        self._cache.store.write(self._cache.namespace, dict(cache_map))

    def snapshot(self) -> CacheMap:
        """Current namespace map."""
        return self._cache.store.read(self._cache.namespace)

    def key_for(self, path: Union[str, Path]) -> str:
        """Cache key ``path`` normalizes to in this namespace."""
        return normalize_key(self._cache.namespace_root, path)

    def was_path_cached(self, path: Union[str, Path]) -> bool:
        """Check if a directory currently has a cached size.

        Args:
            path: Absolute directory path inside the namespace

        Returns:
            True if the path's key is present in the map
        """
        if not is_within(self._cache.namespace_root, path):
            return False
        return self.key_for(path) in self.snapshot()

    def cached_size(self, path: Union[str, Path]) -> Optional[int]:
        """Cached size of ``path``, or None if not cached."""
        return self.snapshot().get(self.key_for(path))

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level cache state for testing.

        Returns:
            Dictionary containing:
            - total_entries: Number of cached directories
            - total_bytes: Sum of all cached values
            - has_cache: Whether the namespace map holds any entry
        """
        cache_map = self.snapshot()
        return {
            'total_entries': len(cache_map),
            'total_bytes': sum(cache_map.values()),
            'has_cache': bool(cache_map),
        }


def build_tree(base: Union[str, Path], spec: TreeSpec) -> Path:
    """Create files and directories under ``base`` from a nested mapping.

    Example:
        build_tree(tmp_path, {
            "a.txt": b"12345",
            "sub": {"b.bin": b"\\x00" * 10, "empty": {}},
        })

    Returns:
        ``base`` as a Path
    """
    base = Path(base)
    base.mkdir(parents=True, exist_ok=True)
    for name, content in spec.items():
        target = base / name
        if isinstance(content, Mapping):
            build_tree(target, content)
        elif isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content)
    return base
