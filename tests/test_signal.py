import logging

from sceneinput.core.signal import SignalBridge, SignalDebugger, SIGNAL_DRAG_STARTED, SIGNAL_KEY_BROADCAST


def test_connect_emit_disconnect():
    bridge = SignalBridge()
    got = []
    conn = bridge.connect(SIGNAL_DRAG_STARTED, lambda *a: got.append(a))

    bridge.emit(SIGNAL_DRAG_STARTED, 1, 2)
    conn.disconnect()
    bridge.emit(SIGNAL_DRAG_STARTED, 3, 4)

    assert got == [(1, 2)]
    assert not bridge.is_connected(SIGNAL_DRAG_STARTED)


def test_disconnect_during_emit_is_deferred():
    bridge = SignalBridge()
    got = []
    conns = []

    def first(*args):
        got.append("first")
        conns[1].disconnect()

    conns.append(bridge.connect(SIGNAL_KEY_BROADCAST, first))
    conns.append(bridge.connect(SIGNAL_KEY_BROADCAST, lambda *a: got.append("second")))

    bridge.emit(SIGNAL_KEY_BROADCAST)
    bridge.emit(SIGNAL_KEY_BROADCAST)

    assert got == ["first", "second", "first"]


def test_handler_error_is_logged_not_raised(caplog):
    bridge = SignalBridge()
    got = []

    def broken(*args):
        raise RuntimeError("nope")

    bridge.connect(SIGNAL_DRAG_STARTED, broken)
    bridge.connect(SIGNAL_DRAG_STARTED, lambda *a: got.append(a))

    with caplog.at_level(logging.ERROR):
        bridge.emit(SIGNAL_DRAG_STARTED, "x")

    assert got == [("x",)]
    assert "nope" in caplog.text


def test_blocked_signal_is_dropped():
    bridge = SignalBridge()
    got = []
    bridge.connect(SIGNAL_DRAG_STARTED, lambda *a: got.append(a))

    bridge.block(SIGNAL_DRAG_STARTED)
    bridge.emit(SIGNAL_DRAG_STARTED, 1)
    bridge.unblock(SIGNAL_DRAG_STARTED)
    bridge.emit(SIGNAL_DRAG_STARTED, 2)

    assert got == [(2,)]


def test_weak_connection_drops_with_owner():
    bridge = SignalBridge()

    class Listener:
        def __init__(self):
            self.got = []

        def on_drag(self, *args):
            self.got.append(args)

    listener = Listener()
    bridge.connect_weak(SIGNAL_DRAG_STARTED, listener, "on_drag")
    bridge.emit(SIGNAL_DRAG_STARTED, 1)
    assert listener.got == [(1,)]

    del listener
    bridge.emit(SIGNAL_DRAG_STARTED, 2)
    assert not bridge.is_connected(SIGNAL_DRAG_STARTED)


def test_debugger_logs_watched_signals(caplog):
    bridge = SignalBridge()
    debugger = SignalDebugger(bridge)
    debugger.watch(SIGNAL_KEY_BROADCAST)
    got = []
    bridge.connect(SIGNAL_KEY_BROADCAST, lambda *a: got.append(a))

    with caplog.at_level(logging.DEBUG, logger="sceneinput.core.signal"):
        bridge.emit(SIGNAL_KEY_BROADCAST, "A", 2)
        bridge.emit(SIGNAL_DRAG_STARTED, "ignored")

    assert got == [("A", 2)]
    assert "SIGNAL: key_broadcast('A', 2)" in caplog.text
    assert "drag_started" not in caplog.text

    debugger.detach()
    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="sceneinput.core.signal"):
        bridge.emit(SIGNAL_KEY_BROADCAST, "B", 2)
    assert "SIGNAL" not in caplog.text


def test_emit_reports_listener_count():
    bridge = SignalBridge()
    bridge.connect(SIGNAL_DRAG_STARTED, lambda *a: None)
    bridge.connect(SIGNAL_DRAG_STARTED, lambda *a: None)

    assert bridge.emit(SIGNAL_DRAG_STARTED) == 2
    assert bridge.emit(SIGNAL_KEY_BROADCAST) == 0


def test_debugger_watches_signals_given_up_front(caplog):
    bridge = SignalBridge()
    SignalDebugger(bridge, signals=[SIGNAL_DRAG_STARTED])

    with caplog.at_level(logging.DEBUG, logger="sceneinput.core.signal"):
        bridge.emit(SIGNAL_DRAG_STARTED, node="p1")

    assert "SIGNAL: drag_started(node='p1')" in caplog.text
