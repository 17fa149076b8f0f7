# sceneinput/app.py
"""
Demo host: a moderngl-window window feeding the input dispatcher.

Run with:  python -m sceneinput.app
Routing decisions are logged; drawing is left to the embedding application.
"""

from __future__ import annotations
import logging

import moderngl_window as mglw

from sceneinput.core.signal import (
    SignalDebugger,
    SIGNAL_DRAG_STARTED, SIGNAL_DRAG_STOPPED, SIGNAL_ITEM_ACTION,
    SIGNAL_KEY_BROADCAST, SIGNAL_UNRESOLVED_SOURCE,
)
from sceneinput.hosts.pointer_router import PointerRouter
from sceneinput.input.dispatcher import InputDispatcher
from sceneinput.input.events import EventType
from sceneinput.scene import Surface, Panel, PassiveItem, InteractiveItem

logger = logging.getLogger(__name__)


def demo_surface(width: int, height: int) -> Surface:
    """Two panels, each with a label and a button."""
    surface = Surface(width=width, height=height)

    for i, title in enumerate(("Transport", "Mixer")):
        panel = Panel(
            name=title,
            x=40 + i * 320,
            y=40,
            width=280,
            height=200,
            on_item_press=lambda item: logger.info(f"pressed {item.name}"),
            on_item_action=lambda item: logger.info(f"action {item.name}"),
        )
        panel.add_item(PassiveItem(name=f"{title} title", x=10, y=10, width=260, height=24))
        panel.add_item(InteractiveItem(name=f"{title} apply", x=10, y=150, width=100, height=32))
        panel.on(EventType.KEY_PRESS, lambda e, p=panel: logger.info(f"{p.name} key={e.key}"))
        surface.add_panel(panel)

    return surface


class InputDemoApp(mglw.WindowConfig):
    """Window whose panels can be dragged by their labels."""

    gl_version = (3, 3)
    title = "sceneinput - moderngl-window host"
    window_size = (960, 540)
    resource_dir = "."

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        w, h = self.window_size
        self.surface = demo_surface(w, h)
        self.dispatcher = InputDispatcher(self.surface)
        self.router = PointerRouter(self.dispatcher, press_action=self.wnd.keys.ACTION_PRESS)

        self.debugger = SignalDebugger(self.dispatcher.bridge, signals=(
            SIGNAL_DRAG_STARTED, SIGNAL_DRAG_STOPPED, SIGNAL_ITEM_ACTION,
            SIGNAL_KEY_BROADCAST, SIGNAL_UNRESOLVED_SOURCE,
        ))

    def on_render(self, t: float, frame_time: float):
        self.ctx.clear(0.08, 0.09, 0.11, 1.0)

    def on_resize(self, width: int, height: int):
        self.surface.size.x = width
        self.surface.size.y = height

    # -------------------------------------------------------------------------
    # Input Handling
    # -------------------------------------------------------------------------

    def on_mouse_position_event(self, x, y, dx, dy):
        self.router.mouse_position_event(x, y, dx, dy)

    def on_mouse_drag_event(self, x, y, dx, dy):
        self.router.mouse_drag_event(x, y, dx, dy)

    def on_mouse_press_event(self, x, y, button):
        self.router.mouse_press_event(x, y, button)

    def on_mouse_release_event(self, x, y, button):
        self.router.mouse_release_event(x, y, button)

    def on_key_event(self, key, action, modifiers):
        self.router.key_event(key, action, modifiers)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    mglw.run_window_config(InputDemoApp)
