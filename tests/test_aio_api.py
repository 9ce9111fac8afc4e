"""
Tests for the async size cache wrappers.
"""

import asyncio
import threading

import pytest

from dirsizelib.aio import clean_dirsize_cache_async, get_dirsize_async
from dirsizelib.sync import DirsizeCache, FileSystemAdapter
from dirsizelib.testing import build_tree


class BlockingAdapter(FileSystemAdapter):
    """Adapter whose listings wait until released."""

    def __init__(self):
        super().__init__()
        self.release = threading.Event()

    def list_children(self, path):
        self.release.wait(timeout=5)
        return super().list_children(path)


@pytest.mark.asyncio
async def test_async_size(cache, upload_root):
    build_tree(upload_root, {"a": {"f": b"x" * 12}})
    assert await get_dirsize_async(cache, upload_root / "a") == 12
    assert await get_dirsize_async(cache) == 12


@pytest.mark.asyncio
async def test_async_size_absent(cache, upload_root):
    assert await get_dirsize_async(cache, upload_root / "missing") is None


@pytest.mark.asyncio
async def test_async_size_within_timeout(cache, upload_root):
    build_tree(upload_root, {"a": {"f": b"x" * 3}})
    assert await get_dirsize_async(cache, upload_root / "a", timeout=5) == 3


@pytest.mark.asyncio
async def test_async_timeout_returns_none(upload_root, store, caplog):
    build_tree(upload_root, {"a": {"f": b"x"}})
    adapter = BlockingAdapter()
    cache = DirsizeCache(str(upload_root), store=store, adapter=adapter)

    with caplog.at_level("WARNING", logger="dirsizelib.aio.api"):
        result = await get_dirsize_async(cache, upload_root / "a", timeout=0.05)
    adapter.release.set()

    assert result is None
    assert "timed out" in caplog.text


@pytest.mark.asyncio
async def test_event_loop_stays_responsive(upload_root, store):
    build_tree(upload_root, {"a": {"f": b"x" * 4}})
    adapter = BlockingAdapter()
    cache = DirsizeCache(str(upload_root), store=store, adapter=adapter)

    task = asyncio.create_task(get_dirsize_async(cache, upload_root / "a"))
    await asyncio.sleep(0.01)
    assert not task.done()

    adapter.release.set()
    assert await task == 4


@pytest.mark.asyncio
async def test_async_invalidate(cache, helper, upload_root):
    build_tree(upload_root, {"a": {"b": {"f": b"x" * 2}}})
    assert await get_dirsize_async(cache, upload_root / "a") == 2
    assert helper.was_path_cached(upload_root / "a" / "b")

    (upload_root / "a" / "b" / "g").write_bytes(b"y" * 3)
    await clean_dirsize_cache_async(cache, upload_root / "a" / "b" / "g")

    assert not helper.was_path_cached(upload_root / "a" / "b")
    assert not helper.was_path_cached(upload_root / "a")
    assert await get_dirsize_async(cache, upload_root / "a") == 5
