"""Event: a broadcast registry exposed through += / -= and call syntax."""

from typing import Any, Callable, Iterator, List, Optional

from chatcast.listener import Listener
from chatcast.registry import BroadcastRegistry, DeliveryFailure


class Event:
    """
    Multicast event. ``event += handler`` subscribes, ``event -= handler``
    unsubscribes (no-op if absent), ``event(*args)`` raises it.

    Declared as a class attribute, each instance of the owning class gets its
    own Event on first access, and the attribute can only be changed with
    += / -=. Unless the declaration fixes ``strict``, the instance event takes
    it from the owner's ``strict_delivery`` attribute, if it has one:

        class Server:
            msg_arrived = Event()

        server.msg_arrived += client.on_msg_arrived
    """

    def __init__(self, name: Optional[str] = None, strict: Optional[bool] = None) -> None:
        self._name = name or "event"
        self._strict = strict
        self._attr: Optional[str] = None
        self._registry = BroadcastRegistry(self._name, strict=strict)

    # ---- descriptor protocol ----

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr = name
        if self._name == "event":
            self._name = f"{owner.__name__}.{name}"

    def __get__(self, instance: Any, owner: Optional[type] = None) -> "Event":
        if instance is None or self._attr is None:
            return self
        bound = instance.__dict__.get(self._attr)
        if bound is None:
            strict = self._strict if self._strict is not None else getattr(instance, "strict_delivery", None)
            bound = Event(f"{self._name}@{id(instance):x}", strict=strict)
            instance.__dict__[self._attr] = bound
        return bound

    def __set__(self, instance: Any, value: Any) -> None:
        # `obj.event += h` ends with a plain assignment of the same Event back.
        if value is not self.__get__(instance):
            raise AttributeError(f"event {self._attr!r} can only be changed with += and -=")

    # ---- subscription ----

    def subscribe(self, handler: Callable[..., Any]) -> Listener:
        return self._registry.register(handler)

    def unsubscribe(self, handler: Any) -> bool:
        return self._registry.unregister(handler)

    def __iadd__(self, handler: Callable[..., Any]) -> "Event":
        self.subscribe(handler)
        return self

    def __isub__(self, handler: Any) -> "Event":
        self.unsubscribe(handler)
        return self

    # ---- raising ----

    def fire(self, *args: Any, excluded: Any = None) -> List[DeliveryFailure]:
        """Call each handler with args in subscription order, skipping those identified by excluded."""
        return self._registry.dispatch(*args, excluded=excluded)

    def __call__(self, *args: Any) -> List[DeliveryFailure]:
        return self.fire(*args)

    # ---- introspection ----

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return len(self._registry)

    def __bool__(self) -> bool:
        return bool(self._registry)

    def __contains__(self, handler: object) -> bool:
        return handler in self._registry

    def __iter__(self) -> Iterator[Listener]:
        return iter(self._registry)

    def __repr__(self) -> str:
        return f"Event(name={self._name!r}, handlers={len(self._registry)})"
