"""Filesystem adapter for DirSizeLib.

This adapter lists real directories with ``os.scandir`` so that entry
kinds and file sizes come from a single directory read plus one cached
stat per entry.
"""

import os
from typing import List

from ..core.adapter import TreeAdapter
from ..core.node import DirEntry, EntryKind


class FileSystemAdapter(TreeAdapter):
    """Adapter for local filesystem trees.

    By default symbolic links are classified as EntryKind.OTHER and
    therefore ignored by size accounting.
    """

    def __init__(self,
                 follow_symlinks: bool = False,
                 include_hidden: bool = True):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: Whether to classify symlinks by their target
            include_hidden: Whether to include dot-files/directories
        """
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK | os.X_OK)

    def list_children(self, path: str) -> List[DirEntry]:
        """Get immediate children with kind and size."""
        children = []
        with os.scandir(path) as entries:
            for entry in entries:
                # Skip hidden files if configured
                if not self.include_hidden and entry.name.startswith('.'):
                    continue
                children.append(self._to_entry(entry))
        return children

    def _to_entry(self, entry: os.DirEntry) -> DirEntry:
        """Classify one scandir entry."""
        try:
            if not self.follow_symlinks and entry.is_symlink():
                kind = EntryKind.OTHER
            elif entry.is_file(follow_symlinks=self.follow_symlinks):
                size = entry.stat(follow_symlinks=self.follow_symlinks).st_size
                return DirEntry(entry.name, entry.path, EntryKind.FILE, size)
            elif entry.is_dir(follow_symlinks=self.follow_symlinks):
                kind = EntryKind.DIRECTORY
            else:
                kind = EntryKind.OTHER
        except FileNotFoundError:
            # Entry vanished between listing and stat
            kind = EntryKind.OTHER
        return DirEntry(entry.name, entry.path, kind)
