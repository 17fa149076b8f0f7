# sceneinput/hosts/hit_index.py
"""
HitIndex - maps window coordinates to the handle of the node under them.

Hosts that only report coordinates (moderngl-window, GLFW) have no native
widget per panel or item, so the source handle is found by hit testing the
scene rects. Coordinates are surface-local (window space).
"""

from __future__ import annotations
from typing import Dict, Hashable, List
import numpy as np

from ..core.geometry import Vec2
from ..scene.surface import Surface


class HitIndex:
    """
    Flat rect table in draw order.

    Each panel is followed by its items, so later rows are on top and the
    last matching row wins.
    """

    def __init__(self, surface: Surface):
        self.surface = surface
        self._handles: List[Hashable] = []
        self._origins: Dict[Hashable, Vec2] = {}
        self._rects = np.zeros((0, 4), dtype=np.float64)
        self.rebuild()

    def __len__(self) -> int:
        return len(self._handles)

    def rebuild(self):
        """Re-read panel/item geometry from the surface."""
        handles: List[Hashable] = []
        rows: List[tuple] = []
        origins: Dict[Hashable, Vec2] = {self.surface.handle: Vec2(0.0, 0.0)}

        for panel in self.surface.panels:
            p = panel.position
            handles.append(panel.handle)
            rows.append((p.x, p.y, panel.size.x, panel.size.y))
            origins[panel.handle] = p.copy()

            for item in panel.items:
                origin = p + item.position
                handles.append(item.handle)
                rows.append((origin.x, origin.y, item.size.x, item.size.y))
                origins[item.handle] = origin

        self._handles = handles
        self._origins = origins
        if rows:
            self._rects = np.asarray(rows, dtype=np.float64)
        else:
            self._rects = np.zeros((0, 4), dtype=np.float64)

    def source_at(self, x: float, y: float) -> Hashable:
        """Top-most item, then panel, falling back to the surface handle."""
        if not self._handles:
            return self.surface.handle

        r = self._rects
        hits = (
            (x >= r[:, 0]) & (x < r[:, 0] + r[:, 2])
            & (y >= r[:, 1]) & (y < r[:, 1] + r[:, 3])
        )
        indices = np.flatnonzero(hits)
        if indices.size == 0:
            return self.surface.handle
        return self._handles[int(indices[-1])]

    def node_origin(self, handle: Hashable) -> Vec2:
        """Surface-local origin of the node bound to handle."""
        origin = self._origins.get(handle)
        return origin.copy() if origin is not None else Vec2(0.0, 0.0)
