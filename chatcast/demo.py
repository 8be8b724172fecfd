"""Console demo: the same three-client broadcast run through each server style."""

from chatcast.delegate_client import DelegateChatClient
from chatcast.delegate_server import DelegateChatServer
from chatcast.event_client import EventChatClient
from chatcast.event_server import EventChatServer
from chatcast.guidelines_client import GuidelinesChatClient
from chatcast.guidelines_server import GuidelinesChatServer


def delegate_chat_server_demo() -> None:
    print("Demo start: Delegate Chat Server.")

    server = DelegateChatServer()
    cc1 = DelegateChatClient("1", server)
    cc2 = DelegateChatClient("2", server)
    cc3 = DelegateChatClient("3", server)

    server.send_msg("Hi to all clients")
    server.send_msg("Hi to all clients except client 2", cc2)

    print("Demo stop: Delegate Chat Server.")


def event_chat_server_demo() -> None:
    print("\n\nDemo start: Event Chat Server.")

    server = EventChatServer()
    cc1 = EventChatClient("1", server)
    cc2 = EventChatClient("2", server)
    cc3 = EventChatClient("3", server)

    server.send_msg("Hi to all clients")
    server.send_msg("Hi to all clients except client 2", cc2)

    print("Demo stop: Event Chat Server.")


def guidelines_based_event_chat_server_demo() -> None:
    s1 = GuidelinesChatServer()
    print(f"\n\nDemo start: Guidelines Based Event Chat Server. Server: {s1}")

    cc1 = GuidelinesChatClient("1", s1)
    cc2 = GuidelinesChatClient("2", s1)
    cc3 = GuidelinesChatClient("3", s1)

    s1.send_msg("Hi to all clients")
    s1.send_msg("Hi to all clients except client 2", cc2)

    print("Demo stop: Guidelines Based Event Chat Server.")


def main() -> int:
    delegate_chat_server_demo()
    event_chat_server_demo()
    guidelines_based_event_chat_server_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
