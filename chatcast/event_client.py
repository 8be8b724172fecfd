"""Client for EventChatServer."""

from typing import Optional, TextIO

from chatcast.client import ChatClient
from chatcast.event_server import EventChatServer


class EventChatClient(ChatClient):
    def __init__(self, client_name: str, server: EventChatServer, out: Optional[TextIO] = None) -> None:
        super().__init__(client_name, out)
        self._server = server
        server.on_msg_arrived += self.on_msg_arrived
        self.on_connect(server)

    def on_msg_arrived(self, msg: str) -> None:
        self._record(msg)
        self._write(f"Msg arrived (Client {self.client_name}): {msg}")

    def disconnect(self) -> None:
        if self.on_msg_arrived in self._server.on_msg_arrived:
            self._server.on_msg_arrived -= self.on_msg_arrived
            self.on_disconnect(self._server)
