#!/usr/bin/env python3
"""
Basic async example showing size queries from an event loop.

This example demonstrates:
- Awaiting a size query without blocking the loop
- Bounding the wait with a timeout
- Invalidating after a write from async code
"""

import asyncio
import sys
from pathlib import Path

from dirsizelib import DirsizeCache
from dirsizelib.aio import clean_dirsize_cache_async, get_dirsize_async


async def main():
    """Demonstrate async size queries."""
    # Get the root path from command line or use current directory
    root_path = Path(sys.argv[1]).absolute() if len(sys.argv) > 1 else Path.cwd()

    print(f"Sizing: {root_path}")
    print("-" * 50)

    with DirsizeCache(str(root_path), max_execution_time=30) as cache:
        size = await get_dirsize_async(cache, timeout=10)
        if size is None:
            print("  No answer within 10s")
            return
        print(f"  Total Size: {size / 1024 / 1024:.1f} MB")
        print(f"  Cached directories: {len(cache.snapshot()):,}")

        # Sizes of the first level come straight from the cache now
        for child in sorted(p for p in root_path.iterdir() if p.is_dir())[:5]:
            child_size = await get_dirsize_async(cache, child)
            print(f"  {(child_size or 0) / 1024:10.1f} KB: {child.name}")
            await clean_dirsize_cache_async(cache, child)
        print(f"  Cached after invalidating: {len(cache.snapshot()):,}")


if __name__ == "__main__":
    asyncio.run(main())
