"""Shared fixtures for the DirSizeLib test suite."""

import pytest

from dirsizelib.stores import MemoryCacheStore
from dirsizelib.sync import DirsizeCache
from dirsizelib.testing import CacheTestHelper


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running test, skipped by run_tests.py")


# Cached layout used by the ancestor invalidation tests:
#   1/{1,2,3} and 2/{1,2}, each leaf value mirrors its path
MOCK_CACHE_MAP = {
    "1/1": 11,
    "1/2": 12,
    "1/3": 13,
    "1": 1,
    "2/1": 21,
    "2/2": 22,
    "2": 2,
}


@pytest.fixture
def upload_root(tmp_path):
    """Empty namespace root directory."""
    root = tmp_path / "uploads"
    root.mkdir()
    return root


@pytest.fixture
def store():
    return MemoryCacheStore()


@pytest.fixture
def cache(upload_root, store):
    with DirsizeCache(str(upload_root), store=store) as cache:
        yield cache


@pytest.fixture
def helper(cache):
    return CacheTestHelper(cache)


@pytest.fixture
def mock_cache_map():
    return dict(MOCK_CACHE_MAP)
