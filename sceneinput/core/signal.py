# sceneinput/core/signal.py
"""
SignalBridge - Observer hub the input layer publishes routing outcomes to.

Listeners never affect routing: a failing listener is logged and the
remaining listeners still run.
"""

from __future__ import annotations
from dataclasses import dataclass
from itertools import count
from typing import Callable, Dict, Iterable, List, Optional, Tuple
from weakref import WeakMethod
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# Signal Types
# =============================================================================

SIGNAL_EVENT_ROUTED = 'event_routed'            # (event, kind, node)
SIGNAL_UNRESOLVED_SOURCE = 'unresolved_source'  # (event,)
SIGNAL_DRAG_STARTED = 'drag_started'            # (node, anchor)
SIGNAL_DRAG_MOVED = 'drag_moved'                # (node, position)
SIGNAL_DRAG_STOPPED = 'drag_stopped'            # (node,)
SIGNAL_KEY_BROADCAST = 'key_broadcast'          # (event, panel_count)
SIGNAL_ITEM_PRESSED = 'item_pressed'            # (panel, item)
SIGNAL_ITEM_ACTION = 'item_action'              # (panel, item)
SIGNAL_PANEL_ADDED = 'panel_added'              # (surface, panel)
SIGNAL_PANEL_REMOVED = 'panel_removed'          # (surface, panel)
SIGNAL_FOCUS_CHANGED = 'focus_changed'          # (surface, panel | None)


# =============================================================================
# Connection Handle
# =============================================================================

@dataclass
class Connection:
    """Returned by connect(); disconnecting twice is harmless."""
    signal: str
    listener_id: int
    bridge: Optional[SignalBridge] = None

    def disconnect(self):
        if self.bridge is not None:
            self.bridge._drop(self.signal, self.listener_id)
            self.bridge = None


# =============================================================================
# Signal Bridge
# =============================================================================

class SignalBridge:
    """Named signals with ordered listeners."""

    def __init__(self):
        self._listeners: Dict[str, Dict[int, Callable]] = {}
        self._ids = count()
        self._blocked: set = set()
        self._depth: int = 0
        self._deferred: List[Tuple[str, int]] = []

    def connect(self, signal: str, listener: Callable) -> Connection:
        listener_id = next(self._ids)
        self._listeners.setdefault(signal, {})[listener_id] = listener
        return Connection(signal=signal, listener_id=listener_id, bridge=self)

    def connect_weak(self, signal: str, obj: object, method_name: str) -> Connection:
        """Connect a bound method without keeping its owner alive."""
        method = WeakMethod(getattr(obj, method_name))
        conn: Connection

        def relay(*args, **kwargs):
            target = method()
            if target is None:
                conn.disconnect()
                return
            target(*args, **kwargs)

        conn = self.connect(signal, relay)
        return conn

    def emit(self, signal: str, *args, **kwargs) -> int:
        """Call every listener of signal; returns how many were called."""
        if signal in self._blocked:
            return 0
        listeners = self._listeners.get(signal)
        if not listeners:
            return 0

        called = 0
        self._depth += 1
        try:
            for listener in list(listeners.values()):
                called += 1
                try:
                    listener(*args, **kwargs)
                except Exception as e:
                    logger.error(f"Listener for '{signal}' failed: {e!r}")
        finally:
            self._depth -= 1
            if self._depth == 0:
                self._flush_deferred()
        return called

    def block(self, signal: str):
        self._blocked.add(signal)

    def unblock(self, signal: str):
        self._blocked.discard(signal)

    def is_connected(self, signal: str) -> bool:
        return bool(self._listeners.get(signal))

    def _drop(self, signal: str, listener_id: int):
        # Removing mid-emit would change the listener set being iterated
        if self._depth > 0:
            self._deferred.append((signal, listener_id))
            return
        self._listeners.get(signal, {}).pop(listener_id, None)

    def _flush_deferred(self):
        while self._deferred:
            signal, listener_id = self._deferred.pop()
            self._listeners.get(signal, {}).pop(listener_id, None)


# =============================================================================
# Signal Debugger
# =============================================================================

class SignalDebugger:
    """Logs selected signals at debug level as they pass through a bridge."""

    def __init__(self, bridge: SignalBridge, signals: Iterable[str] = ()):
        self.bridge = bridge
        self._watched: set = set(signals)
        self._emit = bridge.emit
        bridge.emit = self._logged_emit

    def watch(self, signal: str):
        self._watched.add(signal)

    def _logged_emit(self, signal: str, *args, **kwargs) -> int:
        if signal in self._watched:
            parts = [repr(a) for a in args]
            parts += [f"{k}={v!r}" for k, v in kwargs.items()]
            logger.debug(f"SIGNAL: {signal}({', '.join(parts)})")
        return self._emit(signal, *args, **kwargs)

    def detach(self):
        self.bridge.emit = self._emit


# =============================================================================
# Convenience
# =============================================================================

class SignalEmitter:
    """Mixin for objects that publish to a bridge once one is bound."""

    _bridge: Optional[SignalBridge] = None

    @property
    def signal_bridge(self) -> Optional[SignalBridge]:
        return self._bridge

    def bind_bridge(self, bridge: Optional[SignalBridge]):
        self._bridge = bridge

    def emit_signal(self, signal: str, *args, **kwargs):
        if self._bridge is not None:
            self._bridge.emit(signal, *args, **kwargs)
