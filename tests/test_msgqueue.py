import threading

from roomchat.msgqueue import MessageQueue


def _run_consumer(queue, received):
    result = {}

    def target():
        result["value"] = queue.wait_on_queue(received.append)

    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread, result


def test_add_keeps_order():
    q = MessageQueue()
    q.add({"n": 1})
    q.add({"n": 2})
    assert q.pending() == [{"n": 1}, {"n": 2}]
    assert len(q) == 2


def test_absorb_appends_other_messages():
    a = MessageQueue()
    b = MessageQueue()
    a.add("a1")
    b.add("b1")
    b.add("b2")
    a.absorb(b)
    assert a.pending() == ["a1", "b1", "b2"]
    assert b.pending() == ["b1", "b2"]


def test_absorb_self_is_noop():
    q = MessageQueue()
    q.add("x")
    q.absorb(q)
    assert q.pending() == ["x"]


def test_finished_queue_returns_false_without_processing():
    q = MessageQueue()
    q.add("msg")
    q.finish()
    received = []
    assert q.wait_on_queue(received.append) is False
    assert received == []


def test_invalidated_queue_returns_true():
    q = MessageQueue()
    q.invalidate()
    received = []
    assert q.wait_on_queue(received.append) is True
    assert q.is_online is False


def test_consumer_receives_messages_then_stops_on_finish():
    q = MessageQueue()
    got_both = threading.Event()
    received = []

    def func(message):
        received.append(message)
        if len(received) == 2:
            got_both.set()

    result = {}
    thread = threading.Thread(target=lambda: result.update(v=q.wait_on_queue(func)), daemon=True)
    thread.start()
    q.add("first")
    q.add("second")
    assert got_both.wait(5)
    q.finish()
    thread.join(5)
    assert not thread.is_alive()
    assert received == ["first", "second"]
    assert result["v"] is False


def test_consumer_stops_on_invalidate():
    q = MessageQueue()
    received = []
    thread, result = _run_consumer(q, received)
    q.invalidate()
    thread.join(5)
    assert not thread.is_alive()
    assert result["value"] is True
    assert q.pending() == []


def test_session_identity_fields():
    q = MessageQueue(login="@bob", name="Bob")
    assert (q.login, q.name, q.is_online, q.is_valid) == ("@bob", "Bob", True, True)