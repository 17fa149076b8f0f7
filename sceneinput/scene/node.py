"""
Scene Node Base

Shared pieces of Surface, Panel and Item:
- Handle identity
- Position/size in parent coordinates
- Per-event-type handler lists
- Drag tracking for containers
"""

from __future__ import annotations
from typing import Dict, Hashable, List, Optional

from ..core.geometry import Vec2
from ..input.events import EventType, EventHandler, InputEvent, PointerEvent
from .drag import DragState


# =============================================================================
# Handle
# =============================================================================

class Handle:
    """
    Opaque native widget identity.

    Compared by identity; the name only shows up in logs.
    """

    __slots__ = ("name",)

    def __init__(self, name: str = ""):
        self.name = name

    def __repr__(self) -> str:
        return f"Handle({self.name!r})"


# =============================================================================
# Node
# =============================================================================

class Node:
    """Base class for every scene-graph node."""

    def __init__(
        self,
        name: str = "",
        handle: Hashable = None,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
    ):
        self.name = name
        self.handle = handle if handle is not None else Handle(name)
        self.position = Vec2(x, y)
        self.size = Vec2(width, height)
        self._handlers: Dict[EventType, List[EventHandler]] = {}

    # -------------------------------------------------------------------------
    # Event Handling
    # -------------------------------------------------------------------------

    def on(self, event_type: EventType, handler: EventHandler):
        """Register an event handler."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def off(self, event_type: EventType, handler: EventHandler):
        """Unregister an event handler."""
        if event_type in self._handlers:
            self._handlers[event_type].remove(handler)

    def emit(self, event: InputEvent):
        """Deliver an event to the handlers registered for its type."""
        for handler in list(self._handlers.get(event.type, [])):
            handler(event)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


# =============================================================================
# Draggable Node
# =============================================================================

class DraggableNode(Node):
    """Node that can be moved by dragging (Surface and Panel)."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.drag_state = DragState()

    def _parent_origin(self) -> Vec2:
        """Screen position of the coordinate space this node is placed in."""
        return Vec2(0.0, 0.0)

    def _constrain(self, position: Vec2) -> Vec2:
        return position

    def start_drag(self, event: PointerEvent):
        self.drag_state.start(Vec2(event.x, event.y))

    def stop_drag(self, event: Optional[PointerEvent] = None):
        self.drag_state.stop()

    def drag(self, event: PointerEvent):
        target = self.drag_state.target(
            Vec2(event.screen_x, event.screen_y), self._parent_origin()
        )
        if target is not None:
            self.position = self._constrain(target)
