"""
Surface

Root of the scene graph. Constructed explicitly and handed to the
dispatcher; owns the panel order, the handle registry and its own drag state.
"""

from __future__ import annotations
from typing import Hashable, List, Optional
import logging

from ..core.signal import (
    SignalEmitter,
    SIGNAL_PANEL_ADDED, SIGNAL_PANEL_REMOVED, SIGNAL_FOCUS_CHANGED,
)
from .drag import DragConfig
from .node import DraggableNode
from .panel import Panel
from .registry import SceneRegistry, NodeKind

logger = logging.getLogger(__name__)


class Surface(DraggableNode, SignalEmitter):
    """
    Top-level container.

    Panel order is draw order (last = top-most) and the order key input is
    broadcast in. Position is in screen coordinates.
    """

    def __init__(
        self,
        name: str = "surface",
        handle: Hashable = None,
        panels: List[Panel] = None,
        drag_config: DragConfig = None,
        **kwargs,
    ):
        super().__init__(name=name, handle=handle, **kwargs)
        self.drag_config = drag_config or DragConfig()
        self.registry = SceneRegistry()
        self.registry.register(NodeKind.SURFACE, self)
        self._panels: List[Panel] = []
        self._focused_panel: Optional[Panel] = None
        if panels:
            for panel in panels:
                self.add_panel(panel)

    # -------------------------------------------------------------------------
    # Panel Management
    # -------------------------------------------------------------------------

    @property
    def panels(self) -> List[Panel]:
        return list(self._panels)

    def add_panel(self, panel: Panel):
        self.insert_panel(len(self._panels), panel)

    def insert_panel(self, index: int, panel: Panel):
        if panel.surface is not None:
            raise ValueError(f"{panel!r} already belongs to {panel.surface!r}")

        # Register everything first so a clash leaves the registry untouched
        registered = []
        try:
            self.registry.register(NodeKind.PANEL, panel)
            registered.append(panel)
            for item in panel.items:
                self.registry.register(NodeKind.ITEM, item)
                registered.append(item)
        except ValueError:
            for node in registered:
                self.registry.unregister(node)
            raise

        panel._surface = self
        self._panels.insert(index, panel)
        logger.debug(f"panel added: {panel!r} at {index}")
        self.emit_signal(SIGNAL_PANEL_ADDED, self, panel)

    def remove_panel(self, panel: Panel):
        if panel.surface is not self:
            raise ValueError(f"{panel!r} is not in {self!r}")
        self._panels.remove(panel)
        for item in panel.items:
            self.registry.unregister(item)
        self.registry.unregister(panel)
        panel._surface = None
        panel.stop_drag()
        if self._focused_panel is panel:
            self.set_focus(None)
        logger.debug(f"panel removed: {panel!r}")
        self.emit_signal(SIGNAL_PANEL_REMOVED, self, panel)

    def bring_to_front(self, panel: Panel):
        if panel in self._panels:
            self._panels.remove(panel)
            self._panels.append(panel)

    # -------------------------------------------------------------------------
    # Focus
    # -------------------------------------------------------------------------

    @property
    def focused_panel(self) -> Optional[Panel]:
        return self._focused_panel

    def set_focus(self, panel: Optional[Panel]):
        if panel is not None and panel.surface is not self:
            raise ValueError(f"Cannot focus {panel!r}: not in {self!r}")
        if self._focused_panel is panel:
            return
        self._focused_panel = panel
        self.emit_signal(SIGNAL_FOCUS_CHANGED, self, panel)
