"""Testing utilities for DirSizeLib consumers."""

from .fixtures import CacheTestHelper, build_tree

__all__ = ['CacheTestHelper', 'build_tree']
