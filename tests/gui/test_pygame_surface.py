"""
Unit tests for the pygame render surface, drawn off-screen
"""

import pygame
import pytest

from canvas_pong.core.entities import DashedLine
from canvas_pong.gui.pygame_surface import PygameSurface

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)


@pytest.fixture
def target() -> pygame.Surface:
    return pygame.Surface((100, 60))


@pytest.fixture
def canvas(target: pygame.Surface) -> PygameSurface:
    return PygameSurface(target, background=BLACK)


def pixel(target: pygame.Surface, x: int, y: int) -> tuple[int, int, int]:
    color = target.get_at((x, y))
    return (color.r, color.g, color.b)


class TestPygameSurface:
    """Test path drawing on a pygame surface"""

    def test_size_from_target(self, canvas: PygameSurface):
        assert (canvas.width, canvas.height) == (100, 60)

    def test_clear_rect(self, target, canvas):
        target.fill(WHITE)

        canvas.clear_rect(0, 0, 50, 60)

        assert pixel(target, 10, 10) == BLACK
        assert pixel(target, 70, 10) == WHITE

    def test_fill_rect(self, target, canvas):
        canvas.begin_path()
        canvas.rect(10, 10, 20, 20)
        canvas.fill(RED)

        assert pixel(target, 15, 15) == RED
        assert pixel(target, 5, 5) == BLACK

    def test_stroke_rect_outline(self, target, canvas):
        canvas.begin_path()
        canvas.rect(10, 10, 20, 20)
        canvas.stroke(WHITE, 1)

        assert pixel(target, 10, 15) == WHITE
        assert pixel(target, 20, 20) == BLACK

    def test_begin_path_discards_previous_shapes(self, target, canvas):
        canvas.rect(10, 10, 20, 20)
        canvas.begin_path()
        canvas.fill(RED)

        assert pixel(target, 15, 15) == BLACK

    def test_solid_line(self, target, canvas):
        canvas.begin_path()
        canvas.move_to(50, 0)
        canvas.line_to(50, 59)
        canvas.stroke(WHITE)

        assert all(pixel(target, 50, y) == WHITE for y in range(60))

    def test_line_to_without_start_only_moves(self, target, canvas):
        canvas.begin_path()
        canvas.line_to(10, 10)
        canvas.stroke(WHITE)
        assert pixel(target, 10, 10) == BLACK

        canvas.line_to(20, 10)
        canvas.stroke(WHITE)
        assert pixel(target, 15, 10) == WHITE

    def test_dashed_line(self, target, canvas):
        canvas.begin_path()
        canvas.set_line_dash((5, 15))
        canvas.move_to(50, 0)
        canvas.line_to(50, 60)
        canvas.stroke(WHITE, 1)

        assert pixel(target, 50, 2) == WHITE
        assert pixel(target, 50, 10) == BLACK
        assert pixel(target, 50, 22) == WHITE
        assert pixel(target, 50, 30) == BLACK

    def test_odd_dash_pattern_repeats(self, target, canvas):
        canvas.begin_path()
        canvas.set_line_dash((4,))
        canvas.move_to(50, 0)
        canvas.line_to(50, 60)
        canvas.stroke(WHITE, 1)

        assert pixel(target, 50, 2) == WHITE
        assert pixel(target, 50, 6) == BLACK
        assert pixel(target, 50, 10) == WHITE

    def test_empty_dash_pattern_is_solid(self, target, canvas):
        canvas.set_line_dash((5, 15))
        canvas.set_line_dash(())
        canvas.begin_path()
        canvas.move_to(50, 0)
        canvas.line_to(50, 59)
        canvas.stroke(WHITE)

        assert pixel(target, 50, 10) == WHITE

    def test_zero_dash_pattern_is_solid(self, target, canvas):
        canvas.set_line_dash((0, 0))
        canvas.begin_path()
        canvas.move_to(50, 0)
        canvas.line_to(50, 59)
        canvas.stroke(WHITE)

        assert pixel(target, 50, 10) == WHITE

    def test_negative_dash_rejected(self, canvas):
        with pytest.raises(ValueError):
            canvas.set_line_dash((5, -1))

    def test_divider_drawn_dashed(self, target, canvas):
        divider = DashedLine(dash_pattern=(5, 15), color=WHITE)
        canvas.begin_path()

        divider.draw(canvas)

        assert pixel(target, 50, 2) == WHITE
        assert pixel(target, 50, 10) == BLACK
        assert pixel(target, 50, 22) == WHITE
