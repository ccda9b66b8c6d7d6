"""
Tests for Canvas Pong game entities
"""

import pytest

from canvas_pong.core.entities import BallDirection
from canvas_pong.core.entities import Box
from canvas_pong.core.entities import DashedLine
from canvas_pong.core.entities import Entity
from canvas_pong.core.entities import FillStyle
from canvas_pong.core.entities import Paddle
from canvas_pong.core.entities import PaddleDirection
from canvas_pong.core.entities import Side
from canvas_pong.core.entities import StrokeStyle
from canvas_pong.core.entities import Vector2D
from canvas_pong.core.entities import Vertical


class Recorder:
    """Update and collision handler remembering its calls"""

    def __init__(self, name: str, log: list):
        self.name = name
        self.log = log

    def on_update(self) -> None:
        self.log.append(("update", self.name))

    def on_collision(self, others: list[Entity]) -> None:
        self.log.append(("collision", self.name, [other.id for other in others]))


class TestBox:
    """Tests for Box class"""

    def test_creation(self) -> None:
        """Test box creation and derived edges"""
        box = Box(10.0, 20.0, 30.0, 40.0)
        assert box.right == 40.0
        assert box.bottom == 60.0
        assert box.center_y == 40.0
        assert box.to_tuple() == (10.0, 20.0, 30.0, 40.0)

    def test_zero_size_allowed(self) -> None:
        """Test a degenerate box is still valid"""
        box = Box(5.0, 5.0, 0.0, 0.0)
        assert box.width == 0.0

    @pytest.mark.parametrize("width,height", [(-1.0, 10.0), (10.0, -0.5)])
    def test_negative_size_rejected(self, width: float, height: float) -> None:
        """Test negative sizes are caller errors"""
        with pytest.raises(ValueError):
            Box(0.0, 0.0, width, height)


class TestVector2D:
    """Tests for Vector2D class"""

    def test_creation(self) -> None:
        v = Vector2D(3.0, 4.0)
        assert v.to_tuple() == (3.0, 4.0)

    def test_negative_component_rejected(self) -> None:
        with pytest.raises(ValueError):
            Vector2D(-1.0, 4.0)

    def test_copy_is_independent(self) -> None:
        v = Vector2D(1.0, 2.0)
        copy = v.copy()
        copy.x = 9.0
        assert v.x == 1.0


class TestBallDirection:
    """Tests for direction tag composition"""

    @pytest.mark.parametrize(
        "vertical,side,expected",
        [
            (Vertical.UP, Side.LEFT, BallDirection.UP_LEFT),
            (Vertical.UP, Side.RIGHT, BallDirection.UP_RIGHT),
            (Vertical.DOWN, Side.LEFT, BallDirection.DOWN_LEFT),
            (Vertical.DOWN, Side.RIGHT, BallDirection.DOWN_RIGHT),
        ],
    )
    def test_compose(self, vertical: Vertical, side: Side, expected: BallDirection) -> None:
        direction = BallDirection.compose(vertical, side)
        assert direction is expected
        assert direction.vertical is vertical
        assert direction.side is side

    def test_paused_has_no_components(self) -> None:
        assert BallDirection.PAUSED.vertical is None
        assert BallDirection.PAUSED.side is None
        assert BallDirection.PAUSED.displacement == (0, 0)

    def test_displacement_signs(self) -> None:
        assert BallDirection.UP_LEFT.displacement == (-1, -1)
        assert BallDirection.DOWN_RIGHT.displacement == (1, 1)


class TestEntity:
    """Tests for Entity class"""

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValueError):
            Entity("")

    def test_update_runs_handlers_in_order(self) -> None:
        """Test update handlers run in registration order"""
        log: list = []
        entity = Entity("thing")
        entity.add_update_handler(Recorder("first", log))
        entity.add_update_handler(Recorder("second", log))

        entity.update()

        assert log == [("update", "first"), ("update", "second")]

    def test_collide_forwards_overlap_set(self) -> None:
        """Test every collision handler gets the whole overlap set"""
        log: list = []
        entity = Entity("thing")
        entity.add_collision_handler(Recorder("a", log))
        entity.add_collision_handler(Recorder("b", log))

        entity.collide([Entity("wall"), Entity("post")])

        assert log == [
            ("collision", "a", ["wall", "post"]),
            ("collision", "b", ["wall", "post"]),
        ]

    def test_update_without_surface_does_not_draw(self) -> None:
        entity = Entity("thing", Box(0, 0, 5, 5), fill=FillStyle((255, 255, 255)))
        entity.update()
        assert entity.surface is None

    def test_draw_applies_fill_then_stroke(self, surface) -> None:
        """Test a styled entity draws its box then paints it"""
        entity = Entity(
            "thing",
            Box(1, 2, 3, 4),
            fill=FillStyle((10, 20, 30)),
            stroke=StrokeStyle((40, 50, 60), 2.0),
        )
        entity.set_surface(surface)

        entity.update()

        assert surface.calls == [
            ("rect", 1, 2, 3, 4),
            ("fill", (10, 20, 30)),
            ("stroke", (40, 50, 60), 2.0),
        ]

    def test_unstyled_entity_paints_nothing(self, surface) -> None:
        entity = Entity("wall", Box(0, 0, 10, 1))
        entity.set_surface(surface)
        entity.update()
        assert "fill" not in surface.names()
        assert "stroke" not in surface.names()


class TestPaddle:
    """Tests for Paddle class"""

    def test_creation_defaults(self) -> None:
        """Test paddle defaults come from the game config"""
        paddle = Paddle("playerA", x=20.0, y=150.0)
        assert paddle.box.to_tuple() == (20.0, 150.0, 10.0, 100.0)
        assert paddle.direction is PaddleDirection.IDLE
        assert paddle.speed == 3.0
        assert paddle.fill is not None

    @pytest.mark.parametrize(
        "direction,expected_y",
        [(PaddleDirection.UP, 97.0), (PaddleDirection.DOWN, 103.0), (PaddleDirection.IDLE, 100.0)],
    )
    def test_update_moves_along_direction(
        self, direction: PaddleDirection, expected_y: float
    ) -> None:
        paddle = Paddle("p", y=100.0, speed=3.0)
        paddle.direction = direction
        paddle.update()
        assert paddle.box.y == expected_y

    def test_step_runs_after_handlers(self) -> None:
        """Test a controller decision applies on the same tick"""
        paddle = Paddle("p", y=100.0, speed=4.0)

        class GoDown:
            def on_update(self) -> None:
                paddle.direction = PaddleDirection.DOWN

        paddle.add_update_handler(GoDown())
        paddle.update()

        assert paddle.box.y == 104.0

    def test_negative_speed_rejected(self) -> None:
        paddle = Paddle("p")
        with pytest.raises(ValueError):
            paddle.speed = -1.0

    @pytest.mark.parametrize("y,expected", [(-20.0, 5.0), (5.0, 5.0), (150.0, 150.0), (390.0, 295.0)])
    def test_clamp(self, y: float, expected: float) -> None:
        paddle = Paddle("p", y=y, height=100.0)
        paddle.clamp(400, 5)
        assert paddle.box.y == expected


class TestDashedLine:
    """Tests for the center divider"""

    def test_draws_dashed_vertical_line(self, surface) -> None:
        divider = DashedLine(dash_pattern=(5, 15), color=(255, 255, 255), width=1.0)
        divider.set_surface(surface)

        divider.update()

        assert surface.calls == [
            ("set_line_dash", (5, 15)),
            ("move_to", 350.0, 0),
            ("line_to", 350.0, 400),
            ("stroke", (255, 255, 255), 1.0),
            ("set_line_dash", ()),
        ]
        assert divider.box.x == 350.0
