"""Synchronous implementation of DirSizeLib.

This package contains the blocking size calculator and cache invalidator.
A cold size query walks the directory tree on the calling thread until it
completes or reaches cached subtrees.
"""

# Core components
from .core.adapter import TreeAdapter
from .core.node import DirEntry, EntryKind

# Adapters
from .adapters.filesystem import FileSystemAdapter

# Size cache
from .calculator import DirsizeCalculator
from .invalidator import CacheInvalidator

# High-level API
from .api import (
    DirsizeCache,
    get_dirsize,
    clean_dirsize_cache,
)

__all__ = [
    # Core
    'TreeAdapter',
    'DirEntry',
    'EntryKind',
    # Adapters
    'FileSystemAdapter',
    # Size cache
    'DirsizeCalculator',
    'CacheInvalidator',
    # API
    'DirsizeCache',
    'get_dirsize',
    'clean_dirsize_cache',
]
