"""
Panel

Mid-level container owned by the Surface. Holds an ordered list of items,
owns its own drag state and receives item press/action notifications.
"""

from __future__ import annotations
from typing import Callable, Hashable, List, Optional, TYPE_CHECKING

from ..core.geometry import Vec2, clamp
from ..input.events import KeyEvent, PointerEvent
from .node import DraggableNode
from .item import Item, InteractiveItem
from .registry import NodeKind

if TYPE_CHECKING:
    from .surface import Surface


ItemCallback = Callable[[InteractiveItem], None]


class Panel(DraggableNode):
    """
    Container of items.

    Position is relative to the surface. Key input reaches every panel via
    handle_key_press(); the default delivers it to KEY_PRESS handlers.
    """

    def __init__(
        self,
        name: str = "",
        handle: Hashable = None,
        items: List[Item] = None,
        on_item_press: ItemCallback = None,
        on_item_action: ItemCallback = None,
        **kwargs,
    ):
        super().__init__(name=name, handle=handle, **kwargs)
        self._surface: Optional[Surface] = None
        self._items: List[Item] = []
        self._on_item_press = on_item_press
        self._on_item_action = on_item_action
        if items:
            for item in items:
                self.add_item(item)

    # -------------------------------------------------------------------------
    # Tree Management
    # -------------------------------------------------------------------------

    @property
    def surface(self) -> Optional[Surface]:
        return self._surface

    @property
    def items(self) -> List[Item]:
        return list(self._items)

    def add_item(self, item: Item):
        if item.panel is not None:
            raise ValueError(f"{item!r} already belongs to {item.panel!r}")
        if self._surface is not None:
            self._surface.registry.register(NodeKind.ITEM, item)
        item._panel = self
        self._items.append(item)

    def remove_item(self, item: Item):
        if item.panel is not self:
            raise ValueError(f"{item!r} is not in {self!r}")
        self._items.remove(item)
        item._panel = None
        if self._surface is not None:
            self._surface.registry.unregister(item)

    # -------------------------------------------------------------------------
    # Dragging
    # -------------------------------------------------------------------------

    def _parent_origin(self) -> Vec2:
        if self._surface is None:
            return Vec2(0.0, 0.0)
        return self._surface.position.copy()

    def _constrain(self, position: Vec2) -> Vec2:
        surface = self._surface
        if surface is None or not surface.drag_config.clamp_to_surface:
            return position
        return Vec2(
            clamp(position.x, 0.0, max(0.0, surface.size.x - self.size.x)),
            clamp(position.y, 0.0, max(0.0, surface.size.y - self.size.y)),
        )

    def start_drag_item(self, event: PointerEvent, x: float, y: float):
        """Start a panel drag from a press on an item located at (x, y)."""
        self.drag_state.start(Vec2(event.x + x, event.y + y))

    # -------------------------------------------------------------------------
    # Notifications
    # -------------------------------------------------------------------------

    def handle_mouse_press(self, item: InteractiveItem):
        if self._on_item_press:
            self._on_item_press(item)

    def handle_action_event(self, item: InteractiveItem):
        if self._on_item_action:
            self._on_item_action(item)

    def handle_key_press(self, event: KeyEvent):
        self.emit(event)

    @property
    def focused(self) -> bool:
        return self._surface is not None and self._surface.focused_panel is self
