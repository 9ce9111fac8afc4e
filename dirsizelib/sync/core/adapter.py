"""TreeAdapter abstraction for DirSizeLib.

The calculator and invalidator never touch ``os`` directly. They ask a
TreeAdapter whether a path exists, whether it is a directory, and what its
immediate children are. This keeps the size recurrence independent of the
storage it walks, and lets tests count or fake filesystem access.
"""

import os
from abc import ABC, abstractmethod
from typing import List, Optional

from .node import DirEntry


class TreeAdapter(ABC):
    """Abstract adapter for navigating a directory tree.

    Only the operations the size cache needs are abstract; the parent
    lookup has a path-based default that adapters can override.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether ``path`` currently exists.

        Args:
            path: Absolute path

        Returns:
            True if something exists at ``path``
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Check whether ``path`` is a directory.

        Args:
            path: Absolute path

        Returns:
            True if ``path`` exists and is a directory
        """
        pass

    @abstractmethod
    def list_children(self, path: str) -> List[DirEntry]:
        """List the immediate children of a directory.

        Args:
            path: Absolute directory path

        Returns:
            List of DirEntry for every child (order unspecified)

        Raises:
            OSError: If the directory cannot be listed
        """
        pass

    def is_readable(self, path: str) -> bool:
        """Check whether the directory can be listed.

        Default assumes anything that exists is readable.
        """
        return self.exists(path)

    def get_parent(self, path: str) -> Optional[str]:
        """Get the parent directory path.

        Args:
            path: Absolute path

        Returns:
            Parent path, or None if ``path`` is a filesystem root
        """
        stripped = path.rstrip("/" + os.sep) or path
        parent = os.path.dirname(stripped)
        if not parent or parent == stripped:
            return None
        return parent
