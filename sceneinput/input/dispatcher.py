# sceneinput/input/dispatcher.py
"""
InputDispatcher - routes raw host events into the scene graph.

Pointer and action events are resolved by source handle in priority order:
- the Surface itself, otherwise...
- one of the Surface's Panels, otherwise...
- one of the Panels' Items, otherwise...
- unresolved: a warning is logged and the event is dropped.

Key events work differently. The Surface is the source of all key input and
every Panel receives it through handle_key_press(), focused or not; each
Panel decides how to react.

Every entry point consumes the event before returning, on every path.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional
import logging

from ..core.signal import (
    SignalBridge, SignalEmitter,
    SIGNAL_EVENT_ROUTED, SIGNAL_UNRESOLVED_SOURCE,
    SIGNAL_DRAG_STARTED, SIGNAL_DRAG_MOVED, SIGNAL_DRAG_STOPPED,
    SIGNAL_KEY_BROADCAST, SIGNAL_ITEM_PRESSED, SIGNAL_ITEM_ACTION,
)
from ..scene.item import Item, InteractiveItem
from ..scene.node import DraggableNode
from ..scene.panel import Panel
from ..scene.registry import NodeKind, Resolution
from ..scene.surface import Surface
from .events import (
    EventType, InputEvent, PointerEvent, KeyEvent, ActionEvent,
)

logger = logging.getLogger(__name__)


@dataclass
class DispatcherConfig:
    log_unresolved: bool = True  # Warn when an event source matches no node


ContainerStep = Callable[[DraggableNode, PointerEvent], None]
PassiveStep = Callable[[Panel, Item, PointerEvent], None]
InteractiveStep = Callable[[Panel, InteractiveItem, InputEvent], None]


class InputDispatcher(SignalEmitter):
    """
    Single entry point per event category for one Surface.

    A Surface publishes to one bridge. The first dispatcher binds it; later
    dispatchers built without a bridge reuse the Surface's, and an explicit
    bridge only receives dispatcher signals.
    """

    def __init__(
        self,
        surface: Surface,
        bridge: SignalBridge = None,
        config: DispatcherConfig = None,
    ):
        self.surface = surface
        self.config = config or DispatcherConfig()
        self.bridge = bridge or surface.signal_bridge or SignalBridge()
        self.bind_bridge(self.bridge)
        if surface.signal_bridge is None:
            surface.bind_bridge(self.bridge)

        self._routes: Dict[EventType, Callable[[InputEvent], None]] = {
            EventType.POINTER_PRESS: self.mouse_pressed,
            EventType.POINTER_RELEASE: self.mouse_released,
            EventType.POINTER_CLICK: self.mouse_clicked,
            EventType.POINTER_ENTER: self.mouse_entered,
            EventType.POINTER_EXIT: self.mouse_exited,
            EventType.POINTER_MOVE: self.mouse_moved,
            EventType.POINTER_DRAG: self.mouse_dragged,
            EventType.KEY_PRESS: self.key_pressed,
            EventType.ACTION: self.action_performed,
        }

    def dispatch(self, event: InputEvent):
        """Route any event by its type."""
        self._routes[event.type](event)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve_source(self, event: InputEvent) -> Optional[Resolution]:
        source = event.source
        surface = self.surface

        if source is surface.handle:
            return Resolution(NodeKind.SURFACE, surface)

        panel = surface.registry.resolve_panel(source)
        if panel is not None:
            return Resolution(NodeKind.PANEL, panel)

        item = surface.registry.resolve_item(source, log_missing=self.config.log_unresolved)
        if item is not None:
            return Resolution(NodeKind.ITEM, item)

        self.emit_signal(SIGNAL_UNRESOLVED_SOURCE, event)
        return None

    # -------------------------------------------------------------------------
    # Pointer Events
    # -------------------------------------------------------------------------

    def mouse_pressed(self, event: PointerEvent):
        self._route(
            event,
            on_container=self._start_drag,
            on_passive=self._start_drag_item,
            on_interactive=self._notify_press,
        )

    def mouse_released(self, event: PointerEvent):
        self._route(
            event,
            on_container=self._stop_drag,
            on_passive=lambda panel, item, e: self._stop_drag(panel, e),
        )

    def mouse_clicked(self, event: PointerEvent):
        # Press + release already cover clicks
        event.consume()

    def mouse_entered(self, event: PointerEvent):
        self._route(event)

    def mouse_exited(self, event: PointerEvent):
        self._route(event)

    def mouse_moved(self, event: PointerEvent):
        self._route(event)

    def mouse_dragged(self, event: PointerEvent):
        self._route(
            event,
            on_container=self._drag,
            on_passive=lambda panel, item, e: self._drag(panel, e),
        )

    # -------------------------------------------------------------------------
    # Key / Action Events
    # -------------------------------------------------------------------------

    def key_pressed(self, event: KeyEvent):
        panels = self.surface.panels
        try:
            # If there are no panels, ignore the input
            if not panels:
                return
            for panel in panels:
                panel.handle_key_press(event)
            self.emit_signal(SIGNAL_KEY_BROADCAST, event, len(panels))
        finally:
            event.consume()

    def action_performed(self, event: ActionEvent):
        self._route(event, on_interactive=self._notify_action)

    # -------------------------------------------------------------------------
    # Routing
    # -------------------------------------------------------------------------

    def _route(
        self,
        event: InputEvent,
        on_container: ContainerStep = None,
        on_passive: PassiveStep = None,
        on_interactive: InteractiveStep = None,
    ):
        try:
            found = self.resolve_source(event)
            if found is None:
                return

            if found.kind == NodeKind.ITEM:
                item = found.node
                panel = item.panel
                interactive = item.as_interactive()
                if interactive is not None:
                    interactive.emit(event)
                    if on_interactive:
                        on_interactive(panel, interactive, event)
                else:
                    # Passive items are part of their panel's drag area
                    panel.emit(event)
                    if on_passive:
                        on_passive(panel, item, event)
            else:
                found.node.emit(event)
                if on_container:
                    on_container(found.node, event)

            logger.debug(f"{event.type.name} -> {found.kind.name.lower()} {found.node!r}")
            self.emit_signal(SIGNAL_EVENT_ROUTED, event, found.kind, found.node)
        finally:
            event.consume()

    def _start_drag(self, node: DraggableNode, event: PointerEvent):
        node.start_drag(event)
        self.emit_signal(SIGNAL_DRAG_STARTED, node, node.drag_state.anchor)

    def _start_drag_item(self, panel: Panel, item: Item, event: PointerEvent):
        panel.start_drag_item(event, item.position.x, item.position.y)
        self.emit_signal(SIGNAL_DRAG_STARTED, panel, panel.drag_state.anchor)

    def _drag(self, node: DraggableNode, event: PointerEvent):
        was_dragging = node.drag_state.dragging
        node.drag(event)
        if was_dragging:
            self.emit_signal(SIGNAL_DRAG_MOVED, node, node.position.copy())

    def _stop_drag(self, node: DraggableNode, event: PointerEvent):
        was_dragging = node.drag_state.dragging
        node.stop_drag(event)
        if was_dragging:
            self.emit_signal(SIGNAL_DRAG_STOPPED, node)

    def _notify_press(self, panel: Panel, item: InteractiveItem, event: PointerEvent):
        panel.handle_mouse_press(item)
        self.emit_signal(SIGNAL_ITEM_PRESSED, panel, item)

    def _notify_action(self, panel: Panel, item: InteractiveItem, event: ActionEvent):
        panel.handle_action_event(item)
        self.emit_signal(SIGNAL_ITEM_ACTION, panel, item)
