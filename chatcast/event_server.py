"""Event-style chat server: clients subscribe with `server.on_msg_arrived += callback`."""

from typing import Any, List, Optional

from chatcast.event import Event
from chatcast.registry import DeliveryFailure
from chatcast.server import ChatServer


class EventChatServer(ChatServer):
    on_msg_arrived = Event()

    def __init__(self, server_id: Optional[str] = None, strict: Optional[bool] = None) -> None:
        super().__init__(server_id, strict)

    def send_msg(self, msg: str, exclude_client: Any = None) -> List[DeliveryFailure]:
        failures = self.on_msg_arrived.fire(msg, excluded=exclude_client)
        self.on_send(msg, exclude_client, failures)
        return failures
