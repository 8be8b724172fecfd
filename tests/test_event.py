import pytest

from chatcast.event import Event


class Server:
    changed = Event()


def test_iadd_and_call(abc, deliveries):
    a, b, _ = abc
    event = Event("test")
    event += a
    event += b

    event("hi")

    assert deliveries == [("A", "hi"), ("B", "hi")]
    assert len(event) == 2


def test_isub_absent_handler_is_noop(abc):
    a, b, _ = abc
    event = Event()
    event += a

    event -= b
    event -= b

    assert len(event) == 1
    assert a in event


def test_empty_event_is_falsy_and_fires_nothing():
    event = Event()

    assert not event
    assert event("nobody") == []


def test_fire_with_exclusion(abc, deliveries):
    a, b, c = abc
    event = Event()
    for handler in (a, b, c):
        event += handler

    event.fire("msg", excluded=b)

    assert deliveries == [("A", "msg"), ("C", "msg")]


def test_class_attribute_gives_each_instance_its_own_event(abc, deliveries):
    a, b, _ = abc
    first, second = Server(), Server()

    first.changed += a
    second.changed += b
    first.changed("x")

    assert deliveries == [("A", "x")]
    assert first.changed is first.changed
    assert first.changed is not second.changed
    assert isinstance(Server.changed, Event)


def test_declared_event_cannot_be_reassigned():
    server = Server()

    with pytest.raises(AttributeError):
        server.changed = Event()


def test_event_name_from_owner():
    assert Server.changed.name == "Server.changed"
    assert Server().changed.name.startswith("Server.changed@")
