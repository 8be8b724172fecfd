"""Abstract ChatServer: the broadcasting side of the chat demo."""

import itertools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Optional

from chatcast.observability import get_logger

if TYPE_CHECKING:
    from chatcast.registry import DeliveryFailure

_server_ids = itertools.count(1)


class ChatServer(ABC):
    """Base class for servers that broadcast chat messages to connected clients."""

    def __init__(self, server_id: Optional[str] = None, strict: Optional[bool] = None) -> None:
        self._server_id = server_id or f"{self.__class__.__name__}-{next(_server_ids)}"
        self._strict = strict
        self._logger = get_logger("chatcast.server")

    @property
    def server_id(self) -> str:
        return self._server_id

    @property
    def strict_delivery(self) -> Optional[bool]:
        """True to abort a broadcast on the first failing client; None defers to CHATCAST_STRICT_DELIVERY."""
        return self._strict

    @abstractmethod
    def send_msg(self, msg: str, exclude_client: Any = None) -> List["DeliveryFailure"]:
        """
        Send msg to every connected client except exclude_client (matched by
        identity; None means everyone). Must be implemented by subclasses.
        """
        pass

    def on_send(self, msg: str, exclude_client: Any, failures: List["DeliveryFailure"]) -> None:
        """Called after a message is broadcast (for observability)."""
        self._logger.info(
            "sent",
            extra={
                "server_id": self._server_id,
                "excluded": repr(exclude_client) if exclude_client is not None else None,
                "failures": len(failures),
                "length": len(msg),
            },
        )

    def __str__(self) -> str:
        return self._server_id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._server_id!r})"
