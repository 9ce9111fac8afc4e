"""Configuration system for DirSizeLib.

This module defines how callers describe a size cache namespace: which
directory keys are relative to, where cached maps are stored, and which
limits apply to cold size computations.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Set


class CacheBackend(Enum):
    """Where a namespace's CacheMap is kept."""
    MEMORY = "memory"   # In-process store (cachetools)
    DISK = "disk"       # Persisted store (diskcache)
    CUSTOM = "custom"   # Caller-supplied CacheStore


@dataclass
class DirsizeConfig:
    """Complete configuration for one size cache namespace.

    ``DirsizeCache.from_config`` validates this and builds the matching
    store, calculator and invalidator.
    """

    # Base directory every cache key is relative to
    namespace_root: str = ""

    # Store scope; defaults to the normalized namespace root
    namespace: Optional[str] = None

    # Directories treated as absent during size computation
    exclude: Optional[Set[str]] = None

    # Give up a cold computation after this many seconds (None = no limit)
    max_execution_time: Optional[float] = None

    # Storage
    cache_backend: CacheBackend = CacheBackend.MEMORY
    cache_dir: Optional[str] = None         # Required for DISK
    cache_ttl: Optional[float] = None       # Optional expiry of whole maps
    custom_store: Optional[Any] = None      # Required for CUSTOM

    # Filesystem adapter behaviour
    follow_symlinks: bool = False
    include_hidden: bool = True

    @classmethod
    def in_memory(cls, namespace_root: str, **kwargs) -> 'DirsizeConfig':
        """Create config for an in-process cache."""
        return cls(namespace_root=namespace_root, cache_backend=CacheBackend.MEMORY, **kwargs)

    @classmethod
    def on_disk(cls, namespace_root: str, cache_dir: str, **kwargs) -> 'DirsizeConfig':
        """Create config for a cache persisted under ``cache_dir``."""
        return cls(
            namespace_root=namespace_root,
            cache_backend=CacheBackend.DISK,
            cache_dir=cache_dir,
            **kwargs
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.namespace_root:
            errors.append("namespace_root is required")
        elif not os.path.isabs(self.namespace_root):
            errors.append("namespace_root must be an absolute path")

        if self.max_execution_time is not None and self.max_execution_time <= 0:
            errors.append("max_execution_time must be positive")

        if self.cache_ttl is not None and self.cache_ttl <= 0:
            errors.append("cache_ttl must be positive")

        if self.cache_backend == CacheBackend.DISK and not self.cache_dir:
            errors.append("cache_dir required when cache_backend is DISK")

        if self.cache_backend == CacheBackend.CUSTOM and self.custom_store is None:
            errors.append("custom_store required when cache_backend is CUSTOM")

        return errors
