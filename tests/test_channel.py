import threading

import pytest

from structkit.channel import Channel, ChannelClosed


def test_buffered_values_arrive_in_order():
    ch = Channel(10)
    for value in range(5):
        ch.send(value)
    assert [ch.receive() for _ in range(5)] == list(range(5))


def test_close_drains_remaining_then_raises():
    ch = Channel(3)
    ch.send("x")
    ch.send("y")
    ch.close()
    assert ch.receive() == "x"
    assert ch.receive() == "y"
    with pytest.raises(ChannelClosed):
        ch.receive()


def test_send_after_close_raises():
    ch = Channel(2)
    ch.close()
    assert ch.closed is True
    with pytest.raises(ChannelClosed):
        ch.send(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Channel(-1)


def test_iteration_with_producer_thread():
    ch = Channel(10)

    def producer():
        for value in range(5):
            ch.send(value)
        ch.close()

    worker = threading.Thread(target=producer)
    worker.start()
    received = list(ch)
    worker.join(timeout=5)
    assert received == list(range(5))


def test_full_channel_blocks_sender_until_receive():
    ch = Channel(1)
    ch.send("first")
    worker = threading.Thread(target=ch.send, args=("second",))
    worker.start()
    worker.join(timeout=0.1)
    assert worker.is_alive()
    assert ch.receive() == "first"
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert ch.receive() == "second"


def test_unbuffered_channel_holds_one_pending_value():
    ch = Channel()
    ch.send("a")
    worker = threading.Thread(target=ch.send, args=("b",))
    worker.start()
    worker.join(timeout=0.1)
    assert worker.is_alive()
    assert ch.receive() == "a"
    worker.join(timeout=5)
    assert ch.receive() == "b"


def test_close_wakes_blocked_receiver():
    ch = Channel(2)
    errors = []

    def consumer():
        try:
            ch.receive()
        except ChannelClosed as exc:
            errors.append(exc)

    worker = threading.Thread(target=consumer)
    worker.start()
    worker.join(timeout=0.1)
    ch.close()
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert len(errors) == 1
    assert isinstance(errors[0], ChannelClosed)
    with pytest.raises(ChannelClosed):
        ch.receive()