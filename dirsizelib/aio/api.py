"""High-level async API for DirSizeLib.

The size cache itself is synchronous. These wrappers run it on a worker
thread so an event loop stays responsive during a cold walk, and let the
caller bound how long it is willing to wait.

Note:
    ``asyncio.wait_for`` stops waiting on timeout but cannot interrupt the
    worker thread, which finishes its walk in the background. Configure
    ``max_execution_time`` on the cache to bound the walk itself.
"""

import asyncio
import logging
import os
from typing import Optional

from ..sync.api import DirsizeCache

logger = logging.getLogger(__name__)


async def get_dirsize_async(
    cache: DirsizeCache,
    path: Optional[str] = None,
    timeout: Optional[float] = None
) -> Optional[int]:
    """Size a directory without blocking the event loop.

    Args:
        cache: Open DirsizeCache for the namespace containing ``path``
        path: Directory to size (default: the namespace root)
        timeout: Seconds to wait before giving up (None = wait forever)

    Returns:
        Size in bytes, or None if absent or the timeout expired
    """
    if path is not None:
        path = os.fspath(path)
    call = asyncio.to_thread(cache.size, path)
    if timeout is None:
        return await call

    try:
        return await asyncio.wait_for(call, timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("Size query for %s timed out after %.1fs", path or cache.namespace_root, timeout)
        return None


async def clean_dirsize_cache_async(cache: DirsizeCache, path: str) -> None:
    """Invalidate cached sizes after a write, off the event loop thread."""
    await asyncio.to_thread(cache.invalidate, os.fspath(path))
