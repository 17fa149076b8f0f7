# sceneinput/hosts/pointer_router.py
"""
PointerRouter - adapts moderngl-window style callbacks to InputDispatcher.

moderngl-window reports window coordinates only. The router finds the
source handle through a HitIndex and fills in what a widget toolkit would
normally provide:
- enter/exit when the node under the pointer changes
- pointer capture: drags and the release go to the pressed source
- click + action when a release lands on the pressed source
"""

from __future__ import annotations
from typing import Any, Hashable, Optional
import logging

from ..input.dispatcher import InputDispatcher
from ..input.events import (
    EventType, PointerEvent, KeyEvent, ActionEvent,
    MOD_SHIFT, MOD_CTRL, MOD_ALT,
)
from .hit_index import HitIndex

logger = logging.getLogger(__name__)


def modifier_flags(modifiers: Any) -> int:
    """Convert a KeyModifiers-like object (shift/ctrl/alt attributes) to flags."""
    if modifiers is None:
        return 0
    if isinstance(modifiers, int):
        return modifiers
    flags = 0
    if getattr(modifiers, "shift", False):
        flags |= MOD_SHIFT
    if getattr(modifiers, "ctrl", False):
        flags |= MOD_CTRL
    if getattr(modifiers, "alt", False):
        flags |= MOD_ALT
    return flags


class PointerRouter:
    """Window callbacks in, handle-tagged events out."""

    def __init__(
        self,
        dispatcher: InputDispatcher,
        index: HitIndex = None,
        press_action: Any = None,
    ):
        self.dispatcher = dispatcher
        self.index = index or HitIndex(dispatcher.surface)
        self.press_action = press_action  # wnd.keys.ACTION_PRESS; None accepts every action
        self._hovered: Optional[Hashable] = None
        self._captured: Optional[Hashable] = None
        self._last_pos = (0.0, 0.0)

    @property
    def hovered(self) -> Optional[Hashable]:
        return self._hovered

    @property
    def captured(self) -> Optional[Hashable]:
        return self._captured

    # -------------------------------------------------------------------------
    # Window Callbacks
    # -------------------------------------------------------------------------

    def mouse_position_event(self, x: float, y: float, dx: float = 0.0, dy: float = 0.0):
        self._last_pos = (x, y)
        source = self._hit(x, y)
        self._update_hover(source, x, y)
        self._send(EventType.POINTER_MOVE, source, x, y)

    def mouse_drag_event(self, x: float, y: float, dx: float = 0.0, dy: float = 0.0):
        self._last_pos = (x, y)
        source = self._captured if self._captured is not None else self._hit(x, y)
        self._send(EventType.POINTER_DRAG, source, x, y)

    def mouse_press_event(self, x: float, y: float, button: int):
        self._last_pos = (x, y)
        source = self._hit(x, y)
        self._update_hover(source, x, y)
        self._captured = source
        self._send(EventType.POINTER_PRESS, source, x, y, button)

    def mouse_release_event(self, x: float, y: float, button: int):
        self._last_pos = (x, y)
        under = self._hit(x, y)
        source = self._captured if self._captured is not None else under
        self._captured = None

        self._send(EventType.POINTER_RELEASE, source, x, y, button)
        if source is under:
            self._send(EventType.POINTER_CLICK, source, x, y, button)
            self._maybe_action(source, modifiers=0)

        # Hover may have moved while captured
        self._update_hover(self._hit(x, y), x, y)

    def key_event(self, key: Any, action: Any, modifiers: Any = None):
        if self.press_action is not None and action != self.press_action:
            return
        event = KeyEvent(
            type=EventType.KEY_PRESS,
            source=self.dispatcher.surface.handle,
            key=key,
            modifiers=modifier_flags(modifiers),
        )
        self.dispatcher.key_pressed(event)

    def action(self, source: Hashable, command: str = "", modifiers: int = 0):
        """Fire an action event for source directly."""
        event = ActionEvent(
            type=EventType.ACTION,
            source=source,
            command=command,
            modifiers=modifiers,
        )
        self.dispatcher.action_performed(event)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _hit(self, x: float, y: float) -> Hashable:
        # Panels move while dragging, so geometry is re-read every time
        self.index.rebuild()
        return self.index.source_at(x, y)

    def _update_hover(self, source: Hashable, x: float, y: float):
        if source is self._hovered:
            return
        previous = self._hovered
        self._hovered = source
        logger.debug(f"hover {previous!r} -> {source!r}")
        if previous is not None:
            self._send(EventType.POINTER_EXIT, previous, x, y)
        self._send(EventType.POINTER_ENTER, source, x, y)

    def _maybe_action(self, source: Hashable, modifiers: int):
        item = self.dispatcher.surface.registry.resolve_item(source, log_missing=False)
        if item is not None and item.as_interactive() is not None:
            self.action(source, command=item.name, modifiers=modifiers)

    def _send(self, event_type: EventType, source: Hashable, x: float, y: float,
              button: int = 0) -> PointerEvent:
        origin = self.index.node_origin(source)
        surface_pos = self.dispatcher.surface.position
        event = PointerEvent(
            type=event_type,
            source=source,
            x=x - origin.x,
            y=y - origin.y,
            screen_x=surface_pos.x + x,
            screen_y=surface_pos.y + y,
            button=button,
        )
        self.dispatcher.dispatch(event)
        return event
