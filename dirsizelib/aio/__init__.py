"""Asynchronous entry points for DirSizeLib.

This package offloads the synchronous size cache to worker threads so it
can be awaited from asyncio applications with a caller-imposed timeout.
"""

from .api import (
    get_dirsize_async,
    clean_dirsize_cache_async,
)

__all__ = [
    'get_dirsize_async',
    'clean_dirsize_cache_async',
]
