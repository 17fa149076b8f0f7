# sceneinput/scene/drag.py
"""
Drag state shared by Surface and Panel.

A drag is IDLE or DRAGGING(anchor). The anchor is the grab point in the
dragged entity's own coordinates; each drag event places the entity so that
the anchor stays under the pointer.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from enum import Enum, auto
import logging

from ..core.geometry import Vec2

logger = logging.getLogger(__name__)


class DragPhase(Enum):
    IDLE = auto()
    DRAGGING = auto()


@dataclass
class DragConfig:
    clamp_to_surface: bool = False  # Keep dragged panels inside the surface rect


@dataclass
class DragState:
    phase: DragPhase = DragPhase.IDLE
    anchor: Optional[Vec2] = None
    moves: int = 0  # Drag events applied since start

    @property
    def dragging(self) -> bool:
        return self.phase == DragPhase.DRAGGING

    def start(self, anchor: Vec2):
        self.phase = DragPhase.DRAGGING
        self.anchor = anchor
        self.moves = 0
        logger.debug(f"drag start anchor={anchor.to_tuple()}")

    def stop(self):
        if self.phase == DragPhase.DRAGGING:
            logger.debug(f"drag stop after {self.moves} moves")
        self.phase = DragPhase.IDLE
        self.anchor = None

    def target(self, screen: Vec2, parent_origin: Vec2) -> Optional[Vec2]:
        """Position that keeps the anchor under the pointer, or None if idle."""
        if not self.dragging:
            return None
        self.moves += 1
        return screen - parent_origin - self.anchor
