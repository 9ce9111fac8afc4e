"""Cache key normalization for DirSizeLib.

A cache key is the path of a directory relative to the namespace root,
with trailing separators stripped and forward slashes as separators on
every platform. The calculator and the invalidator both derive keys
through this module, so a directory always maps to the same key no matter
which side computed it.

Examples (root ``/srv/uploads``):
    /srv/uploads/2/1      -> "2/1"
    /srv/uploads/2/1/     -> "2/1"
    /srv/uploads/2/./1    -> "2/1"
    /srv/uploads          -> ""    (the root itself, never stored)
"""

import os
import posixpath
from typing import Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

ROOT_KEY = ""


def _strip_trailing(path: str) -> str:
    """Strip trailing separators, keeping a bare filesystem root intact."""
    stripped = path.rstrip("/" + os.sep)
    return stripped or path[:1]


def normalize_path(path: PathLike) -> str:
    """Return a canonical forward-slash form of ``path``.

    Collapses redundant separators and ``.``/``..`` components without
    touching the filesystem (symlinks are not resolved).
    """
    normalized = os.path.normpath(os.fspath(path))
    if os.sep != "/":
        normalized = normalized.replace(os.sep, "/")
    return _strip_trailing(normalized)


def is_within(root: PathLike, path: PathLike) -> bool:
    """Check whether ``path`` is the namespace root or lies below it."""
    root_n = normalize_path(root)
    path_n = normalize_path(path)
    if path_n == root_n:
        return True
    prefix = root_n if root_n.endswith("/") else root_n + "/"
    return path_n.startswith(prefix)


def normalize_key(root: PathLike, path: PathLike) -> str:
    """Map an absolute path inside ``root`` to its namespace-relative cache key.

    Args:
        root: Namespace root every key is relative to
        path: Absolute path lying within ``root``

    Returns:
        The root-relative key, ``""`` for the root itself

    Raises:
        ValueError: If ``path`` lies outside ``root``
    """
    root_n = normalize_path(root)
    path_n = normalize_path(path)
    if path_n == root_n:
        return ROOT_KEY
    if not is_within(root_n, path_n):
        raise ValueError(f"{path_n!r} is outside namespace root {root_n!r}")
    return path_n[len(root_n):].lstrip("/")


def iter_ancestor_keys(root: PathLike, directory: PathLike) -> Iterator[str]:
    """Yield the keys of ``directory`` and each ancestor below ``root``.

    The walk stops before the root itself, when the path can no longer be
    shortened, or as soon as it leaves the namespace.
    """
    root_n = normalize_path(root)
    current = normalize_path(directory)

    while current != root_n and is_within(root_n, current):
        yield normalize_key(root_n, current)
        parent = posixpath.dirname(current)
        if parent == current or not parent:
            break
        current = parent
