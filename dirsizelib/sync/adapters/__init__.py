"""Tree adapters for DirSizeLib."""

from .filesystem import FileSystemAdapter

__all__ = ['FileSystemAdapter']
