"""
PyGame implementation of the render surface
"""

import math
from collections.abc import Sequence

import pygame

from canvas_pong.core.interfaces.renderer import Color
from canvas_pong.utils.config import game_config

Point = tuple[float, float]


class PygameSurface:
    """
    Canvas-like path drawing on top of a pygame.Surface.

    Rectangles and line segments are collected into the current path and
    painted when fill() or stroke() is called. Fill only applies to
    rectangles, stroke applies to both.
    """

    def __init__(self, target: pygame.Surface, background: Color | None = None):
        self.target = target
        self.width, self.height = target.get_size()
        self.background: Color = background or game_config.BACKGROUND_COLOR
        self.line_width = 1.0

        self._rects: list[pygame.Rect] = []
        self._segments: list[tuple[Point, Point]] = []
        self._cursor: Point | None = None
        self._dash: tuple[float, ...] = ()

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.target.fill(self.background, self._to_rect(x, y, width, height))

    def begin_path(self) -> None:
        self._rects = []
        self._segments = []
        self._cursor = None

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._rects.append(self._to_rect(x, y, width, height))

    def move_to(self, x: float, y: float) -> None:
        self._cursor = (x, y)

    def line_to(self, x: float, y: float) -> None:
        if self._cursor is None:
            # Same as canvas: a line_to without start point only sets it
            self._cursor = (x, y)
            return

        self._segments.append((self._cursor, (x, y)))
        self._cursor = (x, y)

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        if any(length < 0 for length in pattern):
            raise ValueError(f"Dash lengths must be non-negative, got {tuple(pattern)}")
        # An all-zero pattern draws solid lines
        self._dash = tuple(pattern) if sum(pattern) > 0 else ()

    def fill(self, color: Color) -> None:
        for rect in self._rects:
            pygame.draw.rect(self.target, color, rect)

    def stroke(self, color: Color, width: float | None = None) -> None:
        line_width = max(1, round(width if width is not None else self.line_width))

        for rect in self._rects:
            pygame.draw.rect(self.target, color, rect, line_width)

        for start, end in self._segments:
            if self._dash:
                self._draw_dashed_line(color, start, end, line_width)
            else:
                pygame.draw.line(self.target, color, start, end, line_width)

    def _draw_dashed_line(self, color: Color, start: Point, end: Point, width: int) -> None:
        length = math.dist(start, end)
        if length == 0:
            return

        # Canvas repeats odd-length patterns to make them even
        pattern = self._dash if len(self._dash) % 2 == 0 else self._dash * 2
        unit_x = (end[0] - start[0]) / length
        unit_y = (end[1] - start[1]) / length

        travelled = 0.0
        index = 0
        while travelled < length:
            segment = min(pattern[index % len(pattern)], length - travelled)
            if index % 2 == 0 and segment > 0:
                dash_start = (start[0] + unit_x * travelled, start[1] + unit_y * travelled)
                dash_end = (
                    start[0] + unit_x * (travelled + segment),
                    start[1] + unit_y * (travelled + segment),
                )
                pygame.draw.line(self.target, color, dash_start, dash_end, width)
            travelled += segment
            index += 1

    @staticmethod
    def _to_rect(x: float, y: float, width: float, height: float) -> pygame.Rect:
        return pygame.Rect(round(x), round(y), round(width), round(height))
