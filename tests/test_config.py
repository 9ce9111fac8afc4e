"""
Tests for DirsizeConfig validation and constructors.
"""

import os
import unittest

from dirsizelib import CacheBackend, DirsizeConfig
from dirsizelib.errors import ConfigurationError


ROOT = os.path.abspath(os.path.join(os.sep, "srv", "uploads"))


class TestDirsizeConfig(unittest.TestCase):
    """Test configuration consistency checks."""

    def test_in_memory_is_valid(self):
        config = DirsizeConfig.in_memory(ROOT)
        self.assertEqual(config.cache_backend, CacheBackend.MEMORY)
        self.assertEqual(config.validate(), [])

    def test_on_disk_is_valid(self):
        config = DirsizeConfig.on_disk(ROOT, "/var/cache/dirsize", cache_ttl=60)
        self.assertEqual(config.cache_backend, CacheBackend.DISK)
        self.assertEqual(config.cache_dir, "/var/cache/dirsize")
        self.assertEqual(config.validate(), [])

    def test_missing_root(self):
        self.assertIn("namespace_root is required", DirsizeConfig().validate())

    def test_relative_root(self):
        errors = DirsizeConfig(namespace_root="uploads").validate()
        self.assertIn("namespace_root must be an absolute path", errors)

    def test_negative_time_limit(self):
        errors = DirsizeConfig.in_memory(ROOT, max_execution_time=-1).validate()
        self.assertIn("max_execution_time must be positive", errors)

    def test_zero_time_limit(self):
        """A zero limit would make every cold query give up at once."""
        errors = DirsizeConfig.in_memory(ROOT, max_execution_time=0).validate()
        self.assertIn("max_execution_time must be positive", errors)

    def test_positive_time_limit(self):
        self.assertEqual(DirsizeConfig.in_memory(ROOT, max_execution_time=0.5).validate(), [])

    def test_non_positive_ttl(self):
        errors = DirsizeConfig.in_memory(ROOT, cache_ttl=0).validate()
        self.assertIn("cache_ttl must be positive", errors)

    def test_disk_requires_cache_dir(self):
        errors = DirsizeConfig(namespace_root=ROOT, cache_backend=CacheBackend.DISK).validate()
        self.assertIn("cache_dir required when cache_backend is DISK", errors)

    def test_custom_requires_store(self):
        errors = DirsizeConfig(namespace_root=ROOT, cache_backend=CacheBackend.CUSTOM).validate()
        self.assertIn("custom_store required when cache_backend is CUSTOM", errors)

    def test_errors_accumulate(self):
        config = DirsizeConfig(namespace_root="rel", cache_ttl=-5,
                               cache_backend=CacheBackend.DISK)
        self.assertEqual(len(config.validate()), 3)


class TestConfigurationError(unittest.TestCase):
    """Test the error carrying validation messages."""

    def test_message_lists_errors(self):
        error = ConfigurationError(["a is wrong", "b is wrong"])
        self.assertEqual(error.errors, ["a is wrong", "b is wrong"])
        self.assertIn("a is wrong", str(error))
        self.assertIn("b is wrong", str(error))


if __name__ == '__main__':
    unittest.main()
