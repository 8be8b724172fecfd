"""Listener handle: a registered callback plus the object it belongs to."""

import inspect
from dataclasses import dataclass
from typing import Any, Callable


def _same_bound_method(a: Any, b: Any) -> bool:
    # Each attribute access creates a new bound method object, so compare what it wraps.
    return (
        inspect.ismethod(a)
        and inspect.ismethod(b)
        and a.__self__ is b.__self__
        and a.__func__ is b.__func__
    )


@dataclass(eq=False)
class Listener:
    """
    Opaque handle for one registration in a BroadcastRegistry.

    Handles compare by identity only. ``owner`` is the object the callback is
    bound to (``callback.__self__`` for bound methods, the callback itself
    otherwise) and is what exclusion by client object matches against.
    """

    callback: Callable[..., Any]
    owner: Any = None

    def __post_init__(self) -> None:
        if not callable(self.callback):
            raise TypeError(f"listener must be callable, got {type(self.callback).__name__}")
        if self.owner is None:
            self.owner = self.callback.__self__ if inspect.ismethod(self.callback) else self.callback

    def __call__(self, *args: Any) -> None:
        self.callback(*args)

    def matches(self, key: Any) -> bool:
        """True if key names this registration: the handle, the callback object, or an equivalent bound method."""
        return key is self or key is self.callback or _same_bound_method(self.callback, key)

    def is_excluded_by(self, excluded: Any) -> bool:
        return self.matches(excluded) or self.owner is excluded

    @property
    def name(self) -> str:
        return getattr(self.callback, "__qualname__", None) or repr(self.callback)

    def __repr__(self) -> str:
        return f"Listener({self.name})"
