import asyncio

from prepwise.core.config import settings
from prepwise.services import relay as relay_module
from prepwise.services.relay import MessageRelay, get_relay, shutdown_relay


class FakeSocket:
    def __init__(self, broken=False):
        self.broken = broken
        self.accepted = False
        self.closed_with = None
        self.sent = []

    async def accept(self):
        self.accepted = True

    async def send_json(self, data):
        if self.broken:
            raise RuntimeError("socket is closed")
        self.sent.append(data)

    async def close(self, code=1000):
        self.closed_with = code


def frame(data):
    return {"event": "message", "data": data}


def test_message_reaches_every_connected_client(client):
    with client.websocket_connect(settings.SOCKET_PATH) as bob:
        # round trip proves bob is registered before alice speaks
        bob.send_json(frame("bob here"))
        assert bob.receive_json() == frame("bob here")

        with client.websocket_connect(settings.SOCKET_PATH) as alice:
            alice.send_json(frame("hello"))

            assert alice.receive_json() == frame("hello")
            assert bob.receive_json() == frame("hello")


def test_broadcast_includes_sender_and_skips_departed():
    async def scenario():
        relay = MessageRelay()
        alice, bob, carol = FakeSocket(), FakeSocket(), FakeSocket()
        alice_id = await relay.connect(alice)
        await relay.connect(bob)
        carol_id = await relay.connect(carol)

        relay.disconnect(carol_id)
        await relay.handle_frame(alice_id, '{"event": "message", "data": "hi"}')
        return alice, bob, carol

    alice, bob, carol = asyncio.run(scenario())

    assert alice.accepted and bob.accepted
    assert alice.sent == [frame("hi")]
    assert bob.sent == [frame("hi")]
    assert carol.sent == []


def test_failed_peer_is_dropped():
    async def scenario():
        relay = MessageRelay()
        healthy, broken = FakeSocket(), FakeSocket(broken=True)
        await relay.connect(healthy)
        await relay.connect(broken)

        await relay.broadcast("ping")
        return relay, healthy

    relay, healthy = asyncio.run(scenario())

    assert healthy.sent == [frame("ping")]
    assert len(relay.connections) == 1


def test_unsupported_frames_are_ignored():
    async def scenario():
        relay = MessageRelay()
        sock = FakeSocket()
        connection_id = await relay.connect(sock)

        await relay.handle_frame(connection_id, "not json")
        await relay.handle_frame(connection_id, '{"event": "typing", "data": "x"}')
        await relay.handle_frame(connection_id, '["message", "x"]')
        return sock

    assert asyncio.run(scenario()).sent == []


def test_disconnect_unknown_connection_is_noop():
    relay = MessageRelay()
    relay.disconnect("never-seen")
    assert relay.connections == {}


def test_relay_is_created_once_and_torn_down():
    async def scenario():
        first = get_relay()
        assert get_relay() is first

        sock = FakeSocket()
        await first.connect(sock)
        await shutdown_relay()
        return first, sock

    first, sock = asyncio.run(scenario())

    assert sock.closed_with == 1000
    assert first.connections == {}
    assert relay_module._relay is None
    assert get_relay() is not first
    asyncio.run(shutdown_relay())
