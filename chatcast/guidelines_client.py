"""Client for GuidelinesChatServer; prints the sending server alongside each message."""

from typing import Optional, TextIO

from chatcast.client import ChatClient
from chatcast.event_args import MsgArrivedEventArgs
from chatcast.guidelines_server import GuidelinesChatServer
from chatcast.server import ChatServer


class GuidelinesChatClient(ChatClient):
    def __init__(self, client_name: str, server: GuidelinesChatServer, out: Optional[TextIO] = None) -> None:
        super().__init__(client_name, out)
        self._server = server
        server.msg_arrived += self.on_msg_arrived
        self.on_connect(server)

    def on_msg_arrived(self, sender: ChatServer, me: MsgArrivedEventArgs) -> None:
        self._record(me.message)
        self._write(f"Msg arrived (Client {self.client_name}): {me.message} Server: {sender}")

    def disconnect(self) -> None:
        if self.on_msg_arrived in self._server.msg_arrived:
            self._server.msg_arrived -= self.on_msg_arrived
            self.on_disconnect(self._server)
