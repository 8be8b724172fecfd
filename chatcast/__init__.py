"""In-process chat broadcast: an ordered, exclusion-aware listener registry and three server styles built on it."""

from chatcast.listener import Listener
from chatcast.registry import BroadcastRegistry, DeliveryFailure
from chatcast.event import Event
from chatcast.event_args import MsgArrivedEventArgs
from chatcast.server import ChatServer
from chatcast.client import ChatClient
from chatcast.delegate_server import DelegateChatServer
from chatcast.delegate_client import DelegateChatClient
from chatcast.event_server import EventChatServer
from chatcast.event_client import EventChatClient
from chatcast.guidelines_server import GuidelinesChatServer
from chatcast.guidelines_client import GuidelinesChatClient

__all__ = [
    "Listener",
    "BroadcastRegistry",
    "DeliveryFailure",
    "Event",
    "MsgArrivedEventArgs",
    "ChatServer",
    "ChatClient",
    "DelegateChatServer",
    "DelegateChatClient",
    "EventChatServer",
    "EventChatClient",
    "GuidelinesChatServer",
    "GuidelinesChatClient",
]
