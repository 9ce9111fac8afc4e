#!/usr/bin/env python3
"""
Upload quota example showing memoized directory sizes.

This example demonstrates:
- A cold size query that walks the tree and memoizes every subdirectory
- A warm query answered from the cache
- Invalidation after an upload, refreshing only the changed chain
"""

import logging
import sys
import tempfile
import time
from pathlib import Path

from dirsizelib import DirsizeCache, clean_dirsize_cache, get_dirsize
from dirsizelib.testing import CacheTestHelper

QUOTA_BYTES = 64 * 1024


def main():
    """Demonstrate a quota check around an upload."""
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)

    with tempfile.TemporaryDirectory() as tmp:
        uploads = Path(tmp) / "uploads"
        for month in ("01", "02", "03"):
            folder = uploads / "2024" / month
            folder.mkdir(parents=True)
            for i in range(20):
                (folder / f"img{i}.jpg").write_bytes(b"\xff" * 512)

        with DirsizeCache(str(uploads)) as cache:
            helper = CacheTestHelper(cache)

            start = time.perf_counter()
            used = get_dirsize(cache, uploads)
            print(f"Cold query:  {used:,} bytes in {(time.perf_counter() - start) * 1000:.2f} ms")

            start = time.perf_counter()
            used = get_dirsize(cache, uploads)
            print(f"Warm query:  {used:,} bytes in {(time.perf_counter() - start) * 1000:.2f} ms")
            print(f"Cached directories: {helper.get_summary()['total_entries']}")

            # Upload a new file, then invalidate its directory chain
            new_file = uploads / "2024" / "02" / "big.png"
            new_file.write_bytes(b"\x00" * 4096)
            clean_dirsize_cache(cache, new_file)
            print(f"After upload, cached: {sorted(helper.snapshot())}")

            used = get_dirsize(cache, uploads)
            status = "OK" if used <= QUOTA_BYTES else "OVER QUOTA"
            print(f"Usage: {used:,} / {QUOTA_BYTES:,} bytes [{status}]")


if __name__ == "__main__":
    main()
