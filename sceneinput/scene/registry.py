# sceneinput/scene/registry.py
"""
SceneRegistry - handle -> node mapping for event source resolution.

Maintained by Surface/Panel as panels and items are added and removed,
so resolving an event source is a single dict lookup.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Hashable, Optional, Union, TYPE_CHECKING
from enum import Enum, auto
import logging

if TYPE_CHECKING:
    from .surface import Surface
    from .panel import Panel
    from .item import Item

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    SURFACE = auto()
    PANEL = auto()
    ITEM = auto()


@dataclass(frozen=True)
class Resolution:
    kind: NodeKind
    node: Union[Surface, Panel, Item]


class SceneRegistry:
    """Handle lookup table; a handle maps to at most one node."""

    def __init__(self):
        self._nodes: Dict[Hashable, Resolution] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, handle: Hashable) -> bool:
        return handle in self._nodes

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, kind: NodeKind, node) -> None:
        handle = node.handle
        existing = self._nodes.get(handle)
        if existing is not None:
            if existing.node is node:
                return
            raise ValueError(
                f"Handle {handle!r} already bound to {existing.kind.name.lower()} {existing.node!r}"
            )
        self._nodes[handle] = Resolution(kind, node)

    def unregister(self, node) -> None:
        existing = self._nodes.get(node.handle)
        if existing is not None and existing.node is node:
            del self._nodes[node.handle]

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def resolve(self, handle: Hashable) -> Optional[Resolution]:
        return self._nodes.get(handle)

    def resolve_panel(self, handle: Hashable) -> Optional[Panel]:
        found = self._nodes.get(handle)
        if found is None or found.kind != NodeKind.PANEL:
            return None
        return found.node

    def resolve_item(self, handle: Hashable, log_missing: bool = True) -> Optional[Item]:
        found = self._nodes.get(handle)
        if found is None or found.kind != NodeKind.ITEM:
            if log_missing:
                logger.warning(f"Item that was acted on was not found: source={handle!r}")
            return None
        return found.node
