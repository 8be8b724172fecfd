"""Guidelines-style chat server: handlers receive (sender, MsgArrivedEventArgs)."""

from typing import Any, List, Optional

from chatcast.event import Event
from chatcast.event_args import MsgArrivedEventArgs
from chatcast.registry import DeliveryFailure
from chatcast.server import ChatServer


class GuidelinesChatServer(ChatServer):
    """
    Server that raises ``msg_arrived`` with itself as the sender and a
    MsgArrivedEventArgs carrying the text.

    The event is raised from ``on_msg_arrived``; subclasses can override it to
    observe or filter messages before handlers see them.
    """

    msg_arrived = Event()

    def __init__(self, server_id: Optional[str] = None, strict: Optional[bool] = None) -> None:
        super().__init__(server_id, strict)

    def send_msg(self, msg: str, exclude_client: Any = None) -> List[DeliveryFailure]:
        args = MsgArrivedEventArgs(msg)
        failures = self.on_msg_arrived(args, exclude_client)
        self.on_send(msg, exclude_client, failures)
        return failures

    def on_msg_arrived(self, args: MsgArrivedEventArgs, exclude_client: Any = None) -> List[DeliveryFailure]:
        """Raise msg_arrived for every handler except those identified by exclude_client."""
        if not self.msg_arrived:
            return []
        self._logger.debug("msg_arrived", extra={"server_id": self.server_id, "event_args": args.to_dict()})
        return self.msg_arrived.fire(self, args, excluded=exclude_client)
