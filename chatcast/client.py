"""Abstract ChatClient: the receiving side of the chat demo."""

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, TextIO

from chatcast.observability import get_logger

if TYPE_CHECKING:
    from chatcast.server import ChatServer


class ChatClient(ABC):
    """Base class for named clients that print the messages they receive."""

    def __init__(self, client_name: str, out: Optional[TextIO] = None) -> None:
        self._client_name = client_name
        self._out = out
        self._received: List[str] = []
        self._connected = False
        self._logger = get_logger("chatcast.client")

    @property
    def client_name(self) -> str:
        return self._client_name

    @property
    def received(self) -> List[str]:
        """Messages delivered to this client, oldest first."""
        return list(self._received)

    @property
    def connected(self) -> bool:
        return self._connected

    @abstractmethod
    def disconnect(self) -> None:
        """Stop receiving messages. Must be implemented by subclasses."""
        pass

    def _write(self, line: str) -> None:
        # Resolve sys.stdout at write time so redirected/captured output is honoured.
        print(line, file=self._out if self._out is not None else sys.stdout)

    def _record(self, msg: str) -> None:
        self._received.append(msg)
        self._logger.info(
            "message_received",
            extra={"client": self._client_name, "count": len(self._received)},
        )

    def on_connect(self, server: "ChatServer") -> None:
        """Called when this client is wired up to a server (for observability)."""
        self._connected = True
        self._logger.info(
            "connected",
            extra={"client": self._client_name, "server_id": server.server_id},
        )

    def on_disconnect(self, server: "ChatServer") -> None:
        """Called when this client is unwired from a server (for observability)."""
        self._connected = False
        self._logger.info(
            "disconnected",
            extra={"client": self._client_name, "server_id": server.server_id},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._client_name!r})"
