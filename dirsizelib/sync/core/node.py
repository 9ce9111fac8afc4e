"""Directory entry representation for DirSizeLib.

Entries are intentionally kept simple - they are data containers produced
by an adapter listing. Navigation logic lives in the adapter.
"""

from enum import Enum
from typing import NamedTuple


class EntryKind(Enum):
    """What a directory entry is, as far as size accounting cares."""
    FILE = "file"            # Regular file, contributes its byte length
    DIRECTORY = "directory"  # Subdirectory, contributes its own total
    OTHER = "other"          # Symlinks, devices, fifos: ignored


class DirEntry(NamedTuple):
    """One immediate child of a directory.

    Attributes:
        name: Entry name within its parent
        path: Full path of the entry
        kind: EntryKind classification
        size: Byte length for files, 0 otherwise
    """
    name: str
    path: str
    kind: EntryKind
    size: int = 0

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
