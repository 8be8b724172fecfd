"""Client for DelegateChatServer."""

from typing import Optional, TextIO

from chatcast.client import ChatClient
from chatcast.delegate_server import DelegateChatServer


class DelegateChatClient(ChatClient):
    def __init__(self, client_name: str, server: DelegateChatServer, out: Optional[TextIO] = None) -> None:
        super().__init__(client_name, out)
        self._server = server
        server.client_connect(self.on_msg_arrived)
        self.on_connect(server)

    def on_msg_arrived(self, msg: str) -> None:
        self._record(msg)
        self._write(f"Msg arrived (Client {self.client_name}): {msg}")

    def disconnect(self) -> None:
        if self._server.client_disconnect(self.on_msg_arrived):
            self.on_disconnect(self._server)
