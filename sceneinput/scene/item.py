"""
Items

Leaf scene nodes bound one-to-one to a native widget handle.

- PassiveItem: display only, pointer input drags the owning panel
- InteractiveItem: own handlers, reports presses/actions to its panel
"""

from __future__ import annotations
from typing import Hashable, Optional, TYPE_CHECKING

from ..input.events import EventType, EventHandler
from .node import Node

if TYPE_CHECKING:
    from .panel import Panel


class Item(Node):
    """Base leaf. Position is relative to the owning panel."""

    def __init__(self, name: str = "", handle: Hashable = None, **kwargs):
        super().__init__(name=name, handle=handle, **kwargs)
        self._panel: Optional[Panel] = None

    @property
    def panel(self) -> Optional[Panel]:
        """Owning panel; kept in sync by Panel.add_item/remove_item."""
        return self._panel

    def as_interactive(self) -> Optional[InteractiveItem]:
        return None


class PassiveItem(Item):
    """Label-like item with no behaviour of its own."""


class InteractiveItem(Item):
    """Button-like item with its own pointer/action handlers."""

    def __init__(
        self,
        name: str = "",
        handle: Hashable = None,
        on_press: EventHandler = None,
        on_release: EventHandler = None,
        on_action: EventHandler = None,
        **kwargs,
    ):
        super().__init__(name=name, handle=handle, **kwargs)
        if on_press:
            self.on(EventType.POINTER_PRESS, on_press)
        if on_release:
            self.on(EventType.POINTER_RELEASE, on_release)
        if on_action:
            self.on(EventType.ACTION, on_action)

    def as_interactive(self) -> Optional[InteractiveItem]:
        return self
