"""Size override hooks for DirSizeLib.

A hook lets a collaborator substitute its own cost model for a directory:
when ``evaluate(path)`` returns an integer, the calculator returns it as the
size of that directory without reading the cache or touching the filesystem.
Returning ``None`` means "no opinion" and the normal computation proceeds.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional, Union


class SizeOverrideHook(ABC):
    """Strategy interface consulted before every directory size lookup."""

    @abstractmethod
    def evaluate(self, path: str) -> Optional[int]:
        """Return a precomputed size for ``path`` or None to defer.

        Args:
            path: Absolute directory path being sized

        Returns:
            Size in bytes, or None to let the calculator compute it
        """
        pass


class NullSizeHook(SizeOverrideHook):
    """Hook that never overrides anything. Used when no hook is given."""

    def evaluate(self, path: str) -> Optional[int]:
        return None


class CallableSizeHook(SizeOverrideHook):
    """Hook that uses a user-provided function.

    Allows custom overrides without subclassing.
    """

    def __init__(self, func: Callable[[str], Optional[int]]):
        """Initialize with an override function.

        Args:
            func: Function(path) -> Optional[int]
        """
        self.func = func

    def evaluate(self, path: str) -> Optional[int]:
        return self.func(path)


class HookPipeline(SizeOverrideHook):
    """Composes several hooks, first match wins.

    Hooks run in registration order; the first one returning a non-None
    value decides the size and later hooks are not consulted.
    """

    def __init__(self, hooks: Optional[Iterable["HookLike"]] = None):
        self.hooks: List[SizeOverrideHook] = []
        for hook in hooks or ():
            self.add(hook)

    def add(self, hook: "HookLike") -> "HookPipeline":
        """Register a hook at the end of the pipeline."""
        self.hooks.append(as_hook(hook))
        return self

    def evaluate(self, path: str) -> Optional[int]:
        for hook in self.hooks:
            value = hook.evaluate(path)
            if value is not None:
                return value
        return None

    def __len__(self) -> int:
        return len(self.hooks)


HookLike = Union[SizeOverrideHook, Callable[[str], Optional[int]], None]


def as_hook(hook: HookLike) -> SizeOverrideHook:
    """Coerce None, a plain function or a hook instance into a hook.

    Raises:
        TypeError: If ``hook`` is none of the accepted forms
    """
    if hook is None:
        return NullSizeHook()
    if isinstance(hook, SizeOverrideHook):
        return hook
    if callable(hook):
        return CallableSizeHook(hook)
    raise TypeError(f"Expected a SizeOverrideHook or callable, got {type(hook).__name__}")
