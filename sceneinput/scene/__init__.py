"""
Scene Graph

Surface -> Panels -> Items, plus the handle registry used to resolve
event sources.
"""

from sceneinput.scene.drag import DragConfig, DragPhase, DragState
from sceneinput.scene.node import Handle, Node, DraggableNode
from sceneinput.scene.item import Item, PassiveItem, InteractiveItem
from sceneinput.scene.panel import Panel
from sceneinput.scene.surface import Surface
from sceneinput.scene.registry import SceneRegistry, NodeKind, Resolution

__all__ = [
    "DragConfig", "DragPhase", "DragState",
    "Handle", "Node", "DraggableNode",
    "Item", "PassiveItem", "InteractiveItem",
    "Panel", "Surface",
    "SceneRegistry", "NodeKind", "Resolution",
]
