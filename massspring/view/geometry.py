"""
Scene geometry derived from the object position and the fixed layout.

Coordinates are window pixels, origin top-left, y pointing down. The
object sits on the ground line at mid-height; the spring is a zig-zag
from the left window edge to the object's left edge.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from massspring.config import DEFAULT_LAYOUT, Layout


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle (x, y is the top-left corner)."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Sequence[float]) -> bool:
        """Half-open test: left/top edges are inside, right/bottom edges are not."""
        px, py = float(point[0]), float(point[1])
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


def object_rect(position: float, layout: Optional[Layout] = None) -> Rect:
    """Bounding square of the mass, resting just above the ground line."""
    layout = layout or DEFAULT_LAYOUT
    size = float(layout.rect_size)
    y = layout.ground_y - size - layout.ground_thick / 2
    return Rect(x=float(position), y=y, width=size, height=size)


def ground_line(layout: Optional[Layout] = None) -> np.ndarray:
    """Ground segment spanning the window width, shape (2, 2)."""
    layout = layout or DEFAULT_LAYOUT
    return np.array([[0.0, layout.ground_y], [float(layout.width), layout.ground_y]])


def spring_vertices(position: float, layout: Optional[Layout] = None) -> np.ndarray:
    """
    Vertices of the zig-zag spring, shape (spring_num + 1, 2).

    Even vertices lie on the upper row, odd ones on the lower row; the first
    vertex is on the left window edge and the last one at x = position.
    """
    layout = layout or DEFAULT_LAYOUT
    n = layout.spring_num
    top = layout.ground_y - layout.spring_len - layout.spring_y_offset
    bottom = layout.ground_y - layout.spring_y_offset
    xs = np.linspace(0.0, float(position), n + 1)
    ys = np.where(np.arange(n + 1) % 2 == 0, top, bottom)
    return np.column_stack([xs, ys])
