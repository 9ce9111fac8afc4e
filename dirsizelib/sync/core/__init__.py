"""Core abstractions for DirSizeLib.

This module contains the adapter interface and the directory entry type
shared by the calculator, the invalidator and every adapter.
"""

from .adapter import TreeAdapter
from .node import DirEntry, EntryKind

__all__ = [
    "DirEntry",
    "EntryKind",
    "TreeAdapter",
]
