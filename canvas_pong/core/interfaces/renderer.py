"""
Render surface protocol - defines the drawing primitives the game needs
"""

from collections.abc import Sequence
from typing import Protocol

Color = tuple[int, int, int]


class RenderSurface(Protocol):
    """
    Protocol for drawing surface implementations.

    Follows the canvas path model: shapes are added to a current path with
    rect/move_to/line_to and painted with fill or stroke. Enables multiple
    backends: pygame, headless recorders for tests, etc.
    """

    width: int
    height: int
    line_width: float

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Erase a rectangular region to the background"""
        ...

    def begin_path(self) -> None:
        """Start a new, empty path"""
        ...

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        """Add a rectangle to the current path"""
        ...

    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path at the given point"""
        ...

    def line_to(self, x: float, y: float) -> None:
        """Add a straight segment from the last point to the given point"""
        ...

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        """
        Set the dash pattern used by stroke.

        Args:
            pattern: Alternating dash and gap lengths; empty for solid lines
        """
        ...

    def fill(self, color: Color) -> None:
        """Fill the rectangles of the current path"""
        ...

    def stroke(self, color: Color, width: float | None = None) -> None:
        """
        Stroke the current path.

        Args:
            color: Stroke color
            width: Line width, defaults to line_width
        """
        ...
