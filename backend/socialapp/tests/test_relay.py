"""
Tests for the realtime chat relay handlers.
"""
import asyncio
from socialapp.realtime.registry import ConnectionRegistry


def run(coro):
    return asyncio.run(coro)


def test_handlers_registered(relay, fake_sio):
    assert set(fake_sio.handlers) == {"connect", "disconnect", "join_chat", "send_message"}


def test_connect_and_disconnect_track_registry(relay):
    run(relay.on_connect("sid-1", {}))
    assert "sid-1" in relay.registry
    run(relay.on_disconnect("sid-1"))
    assert "sid-1" not in relay.registry


def test_join_broadcasts_to_others(relay, fake_sio):
    run(relay.on_connect("sid-1", {}))
    run(relay.on_join_chat("sid-1", "alice"))

    joined = fake_sio.events("user_joined")
    assert len(joined) == 1
    assert joined[0]["data"] == "alice"
    assert joined[0]["skip_sid"] == "sid-1"


def test_message_fans_out_with_name_and_timestamp(relay, fake_sio):
    run(relay.on_connect("sid-1", {}))
    run(relay.on_join_chat("sid-1", "alice"))
    run(relay.on_send_message("sid-1", {"message": "hello"}))

    messages = fake_sio.events("receive_message")
    assert len(messages) == 1
    payload = messages[0]["data"]
    assert payload["username"] == "alice"
    assert payload["message"] == "hello"
    assert payload["timestamp"]
    assert messages[0]["to"] is None
    assert messages[0]["skip_sid"] is None


def test_leave_broadcasts_only_after_join(relay, fake_sio):
    run(relay.on_connect("sid-1", {}))
    run(relay.on_disconnect("sid-1"))
    assert fake_sio.events("user_left") == []

    run(relay.on_connect("sid-2", {}))
    run(relay.on_join_chat("sid-2", "bob"))
    run(relay.on_disconnect("sid-2", "client disconnect"))
    left = fake_sio.events("user_left")
    assert len(left) == 1
    assert left[0]["data"] == "bob"
    assert left[0]["skip_sid"] == "sid-2"


def test_malformed_events_ignored(relay, fake_sio):
    run(relay.on_connect("sid-1", {}))
    run(relay.on_join_chat("sid-1", {"name": "alice"}))
    run(relay.on_join_chat("sid-1", "   "))
    run(relay.on_send_message("sid-1", "hello"))
    run(relay.on_send_message("sid-1", {"message": 5}))
    run(relay.on_send_message("unknown-sid", {"message": "hi"}))
    assert fake_sio.emitted == []


def test_publish_poke(relay, fake_sio):
    run(relay.publish_poke(1, 2))
    assert fake_sio.emitted == [
        {"event": "poke", "data": {"fromUserId": 1, "toUserId": 2}, "to": None, "skip_sid": None}
    ]


def test_registry_remove_returns_name():
    registry = ConnectionRegistry()
    registry.add("a")
    assert registry.set_name("a", "alice")
    assert not registry.set_name("b", "bob")
    assert len(registry) == 1
    assert registry.remove("a") == "alice"
    assert registry.remove("a") is None
