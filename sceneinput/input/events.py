"""
Raw Input Events

Events as delivered by the host window system, tagged with the handle of
the native widget that produced them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable
from enum import Enum, auto


# =============================================================================
# Event Types
# =============================================================================

class EventType(Enum):
    POINTER_PRESS = auto()
    POINTER_RELEASE = auto()
    POINTER_CLICK = auto()
    POINTER_ENTER = auto()
    POINTER_EXIT = auto()
    POINTER_MOVE = auto()
    POINTER_DRAG = auto()
    KEY_PRESS = auto()
    ACTION = auto()


MOD_SHIFT = 1
MOD_CTRL = 2
MOD_ALT = 4


POINTER_EVENTS = frozenset({
    EventType.POINTER_PRESS,
    EventType.POINTER_RELEASE,
    EventType.POINTER_CLICK,
    EventType.POINTER_ENTER,
    EventType.POINTER_EXIT,
    EventType.POINTER_MOVE,
    EventType.POINTER_DRAG,
})


# =============================================================================
# Events
# =============================================================================

@dataclass
class InputEvent:
    """Base raw event."""
    type: EventType
    source: Hashable = None  # Handle of the widget that produced the event

    _consumed: bool = field(default=False, repr=False)

    def consume(self):
        """Mark handled so the host does not process the event further."""
        self._consumed = True

    @property
    def consumed(self) -> bool:
        return self._consumed


@dataclass
class PointerEvent(InputEvent):
    """Pointer event; x/y are local to the source, screen_x/screen_y are absolute."""
    x: float = 0.0
    y: float = 0.0
    screen_x: float = 0.0
    screen_y: float = 0.0
    button: int = 0  # 1=left, 2=right, 3=middle
    modifiers: int = 0


@dataclass
class KeyEvent(InputEvent):
    key: Any = None  # Host key code
    char: str = ""
    modifiers: int = 0


@dataclass
class ActionEvent(InputEvent):
    command: str = ""
    modifiers: int = 0


# Event handler signature
EventHandler = Callable[[InputEvent], None]


def pointer(event_type: EventType, source: Hashable, x: float = 0.0, y: float = 0.0,
            screen_x: float = None, screen_y: float = None, button: int = 0) -> PointerEvent:
    """Build a pointer event; screen coordinates default to the local ones."""
    return PointerEvent(
        type=event_type,
        source=source,
        x=x,
        y=y,
        screen_x=x if screen_x is None else screen_x,
        screen_y=y if screen_y is None else screen_y,
        button=button,
    )
