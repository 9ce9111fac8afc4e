"""
Abstract Cache Store

This module contains the abstract base class that defines the interface
for all CacheMap storage implementations.
"""

from abc import ABC, abstractmethod
from typing import Dict

CacheMap = Dict[str, int]


class CacheStore(ABC):
    """
    Abstract base class for namespace-scoped CacheMap storage.

    The calculator and invalidator use this interface to load and persist
    directory size maps without knowing the underlying storage mechanism.

    The whole map of a namespace is read and written as one unit:
    - read() returns a private copy (absent namespace -> empty dict)
    - write() replaces the stored map wholesale
    - delete() drops the namespace entirely

    Backends raise CacheStoreError when the underlying storage fails.
    """

    @abstractmethod
    def read(self, namespace: str) -> CacheMap:
        """
        Read the CacheMap for a namespace.

        Args:
            namespace: The namespace identifier

        Returns:
            Copy of the stored map, or an empty dict if none exists
        """
        pass

    @abstractmethod
    def write(self, namespace: str, cache_map: CacheMap) -> None:
        """
        Replace the CacheMap for a namespace.

        Args:
            namespace: The namespace identifier
            cache_map: Mapping of cache keys to byte counts
        """
        pass

    @abstractmethod
    def delete(self, namespace: str) -> None:
        """
        Remove the CacheMap for a namespace. Missing namespaces are ignored.

        Args:
            namespace: The namespace identifier
        """
        pass

    def close(self) -> None:
        """Release backend resources. No-op by default."""

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - automatic cleanup."""
        self.close()
