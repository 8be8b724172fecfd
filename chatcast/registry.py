"""Broadcast registry: ordered listeners, synchronous delivery with identity-based exclusion."""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Union

from chatcast.config import load_settings
from chatcast.listener import Listener
from chatcast.observability import Metrics, get_logger


@dataclass(frozen=True)
class DeliveryFailure:
    """A listener that raised during a broadcast, and what it raised."""

    listener: Listener
    error: Exception


class BroadcastRegistry:
    """
    Ordered collection of listeners owned by one broadcaster.

    Registration order is delivery order and duplicates are allowed (each
    registration is delivered to once). Removal and exclusion match by
    identity, never by value.

    By default a raising listener is logged and recorded as a DeliveryFailure
    and delivery continues. With ``strict=True`` the first exception
    propagates and the rest of that broadcast is abandoned.
    """

    def __init__(self, name: str = "default", strict: Optional[bool] = None) -> None:
        self._name = name
        self._listeners: List[Listener] = []
        self._strict = load_settings().strict_delivery if strict is None else strict
        self._metrics = Metrics()
        self._logger = get_logger("chatcast.registry")

    @property
    def name(self) -> str:
        return self._name

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    @property
    def messages_broadcast(self) -> int:
        return self._metrics.get_counter("broadcasts")

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    def register(self, listener: Union[Listener, Callable[..., Any]], owner: Any = None) -> Listener:
        """Append a listener and return its handle. Registering the same callback twice delivers twice."""
        handle = listener if isinstance(listener, Listener) else Listener(listener, owner)
        self._listeners.append(handle)
        self._metrics.set_gauge("listeners", len(self._listeners))
        self._logger.info(
            "registered",
            extra={"registry": self._name, "listener": handle.name, "listeners": len(self._listeners)},
        )
        return handle

    def unregister(self, listener: Any) -> bool:
        """
        Remove the first registration matching listener by identity.
        Returns False (and changes nothing) if it is not registered.
        """
        for index, entry in enumerate(self._listeners):
            if entry.matches(listener):
                del self._listeners[index]
                self._metrics.set_gauge("listeners", len(self._listeners))
                self._logger.info(
                    "unregistered",
                    extra={"registry": self._name, "listener": entry.name, "listeners": len(self._listeners)},
                )
                return True
        return False

    def broadcast(self, message: Any, excluded: Any = None) -> List[DeliveryFailure]:
        """Call every listener with message, in registration order, skipping those identified by excluded."""
        return self.dispatch(message, excluded=excluded)

    def dispatch(self, *args: Any, excluded: Any = None) -> List[DeliveryFailure]:
        """Deliver args to every listener not identified by excluded. Returns the failures, oldest first."""
        snapshot = list(self._listeners)
        self._logger.info(
            "broadcast",
            extra={"registry": self._name, "listeners": len(snapshot), "excluded": excluded is not None},
        )
        failures: List[DeliveryFailure] = []
        delivered = skipped = 0
        try:
            for entry in snapshot:
                if excluded is not None and entry.is_excluded_by(excluded):
                    skipped += 1
                    continue
                try:
                    entry(*args)
                except Exception as e:
                    if self._strict:
                        failures.append(DeliveryFailure(entry, e))
                        raise
                    self._logger.exception(
                        "delivery_failed",
                        extra={"registry": self._name, "listener": entry.name, "error": str(e)},
                    )
                    failures.append(DeliveryFailure(entry, e))
                    continue
                delivered += 1
        finally:
            self._metrics.record_broadcast(delivered, skipped, len(failures))
        return failures

    def clear(self) -> None:
        self._listeners.clear()
        self._metrics.set_gauge("listeners", 0)

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[Listener]:
        return iter(list(self._listeners))

    def __contains__(self, listener: object) -> bool:
        return any(entry.matches(listener) for entry in self._listeners)

    def __bool__(self) -> bool:
        return bool(self._listeners)

    def __repr__(self) -> str:
        return f"BroadcastRegistry(name={self._name!r}, listeners={len(self._listeners)})"
