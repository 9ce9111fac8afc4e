"""Exception hierarchy for DirSizeLib.

Size queries never raise for missing or unreadable directories; those are
reported through the ``None`` absent-indicator. Exceptions are reserved for
misconfiguration and for cache store backends that fail to read or write.
"""


class DirsizeError(Exception):
    """Base class for all DirSizeLib errors."""


class CacheStoreError(DirsizeError):
    """A cache store backend failed to read, write or delete a namespace.

    The calculator and invalidator catch this at the store seam: a failed
    read is treated as a cache miss and a failed write is logged.
    """

    def __init__(self, namespace: str, operation: str, cause: Exception = None):
        self.namespace = namespace
        self.operation = operation
        self.cause = cause
        message = f"Cache store {operation} failed for namespace {namespace!r}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ConfigurationError(DirsizeError):
    """Raised when a DirsizeConfig does not validate."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("Invalid configuration: " + "; ".join(self.errors))
