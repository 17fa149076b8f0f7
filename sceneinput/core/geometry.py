# sceneinput/core/geometry.py
"""
Screen-space geometry for the scene graph.
Positions are in the parent's coordinate space (panel -> surface, item -> panel).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

# =============================================================================
# Vector Types
# =============================================================================

@dataclass
class Vec2:
    """2D vector for screen/panel coordinates."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


# =============================================================================
# Utility Functions
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))
