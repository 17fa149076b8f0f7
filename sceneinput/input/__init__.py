"""
Input

Raw host events and the dispatcher that routes them into the scene graph.
The dispatcher lives in sceneinput.input.dispatcher.
"""

from sceneinput.input.events import (
    EventType, EventHandler,
    InputEvent, PointerEvent, KeyEvent, ActionEvent,
    POINTER_EVENTS, MOD_SHIFT, MOD_CTRL, MOD_ALT,
    pointer,
)

__all__ = [
    "EventType", "EventHandler",
    "InputEvent", "PointerEvent", "KeyEvent", "ActionEvent",
    "POINTER_EVENTS", "MOD_SHIFT", "MOD_CTRL", "MOD_ALT",
    "pointer",
]
