"""Delegate-style chat server: clients connect and disconnect callbacks explicitly."""

from typing import Any, Callable, List, Optional

from chatcast.listener import Listener
from chatcast.registry import BroadcastRegistry, DeliveryFailure
from chatcast.server import ChatServer

MsgArrivedCallback = Callable[[str], None]


class DelegateChatServer(ChatServer):
    """Server whose callback list is private; clients go through client_connect / client_disconnect."""

    def __init__(self, server_id: Optional[str] = None, strict: Optional[bool] = None) -> None:
        super().__init__(server_id, strict)
        self._on_msg_arrived = BroadcastRegistry(self.server_id, strict=self.strict_delivery)

    @property
    def client_count(self) -> int:
        return len(self._on_msg_arrived)

    def client_connect(self, on_msg_arrived: MsgArrivedCallback) -> Listener:
        """Add a callback to the delivery list. Connecting the same callback twice delivers twice."""
        return self._on_msg_arrived.register(on_msg_arrived)

    def client_disconnect(self, on_msg_arrived: Any) -> bool:
        """Remove the first registration of on_msg_arrived; returns False if it was not connected."""
        return self._on_msg_arrived.unregister(on_msg_arrived)

    def send_msg(self, msg: str, exclude_client: Any = None) -> List[DeliveryFailure]:
        failures = self._on_msg_arrived.broadcast(msg, excluded=exclude_client)
        self.on_send(msg, exclude_client, failures)
        return failures


_default_server: Optional[DelegateChatServer] = None


def default_server() -> DelegateChatServer:
    """Process-wide server, created on first use."""
    global _default_server
    if _default_server is None:
        _default_server = DelegateChatServer("delegate-default")
    return _default_server


def reset_default_server() -> None:
    """Drop the process-wide server; the next default_server() call builds a fresh one."""
    global _default_server
    _default_server = None
