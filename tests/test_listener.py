from chatcast.listener import Listener


class Client:
    def __init__(self):
        self.seen = []

    def on_msg(self, msg):
        self.seen.append(msg)

    def other(self, msg):
        pass


def test_bound_method_owner_is_instance():
    client = Client()
    handle = Listener(client.on_msg)

    assert handle.owner is client
    assert handle.is_excluded_by(client)


def test_plain_function_owner_is_function():
    def callback(msg):
        pass

    handle = Listener(callback)

    assert handle.owner is callback
    assert handle.is_excluded_by(callback)


def test_builtin_owner_is_the_builtin():
    assert Listener(print).owner is print


def test_fresh_bound_method_matches():
    client = Client()
    handle = Listener(client.on_msg)

    assert handle.matches(client.on_msg)
    assert not handle.matches(client.other)
    assert not handle.matches(Client().on_msg)


def test_handles_compare_by_identity():
    def callback(msg):
        pass

    assert Listener(callback) != Listener(callback)


def test_call_invokes_callback():
    client = Client()
    Listener(client.on_msg)("hello")

    assert client.seen == ["hello"]
