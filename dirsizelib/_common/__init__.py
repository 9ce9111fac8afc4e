"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code used by both entry points.
It should NOT be imported directly by users.

Components here include:
- Configuration classes (DirsizeConfig)
- Cache key normalization (pure computation, no I/O)

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import CacheBackend, DirsizeConfig
from .keys import (
    ROOT_KEY,
    is_within,
    iter_ancestor_keys,
    normalize_key,
    normalize_path,
)

__all__ = [
    'CacheBackend',
    'DirsizeConfig',
    'ROOT_KEY',
    'is_within',
    'iter_ancestor_keys',
    'normalize_key',
    'normalize_path',
]
