"""
View: scene geometry and the matplotlib window.

Only the geometry is imported here; massspring.view.window pulls in
matplotlib and is imported explicitly by the launcher.
"""

from massspring.view.geometry import Rect, ground_line, object_rect, spring_vertices

__all__ = ["Rect", "ground_line", "object_rect", "spring_vertices"]
