"""
Canvas Pong game entities: ball, paddles, stage limits, center divider
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from canvas_pong.core.errors import GameConfigurationError
from canvas_pong.core.interfaces.handlers import CollisionHandler
from canvas_pong.core.interfaces.handlers import GoalHandler
from canvas_pong.core.interfaces.handlers import UpdateHandler
from canvas_pong.core.interfaces.renderer import Color
from canvas_pong.core.interfaces.renderer import RenderSurface
from canvas_pong.utils.config import game_config

if TYPE_CHECKING:
    from canvas_pong.core.scheduler import Scheduler
    from canvas_pong.core.scheduler import TimerHandle

logger = logging.getLogger(__name__)


class Tag:
    """Ids of the entities a match is made of"""

    PLAYER_A = "playerA"
    PLAYER_B = "playerB"
    BALL = "ball"
    STAGE_TOP = "stageTop"
    STAGE_RIGHT = "stageRight"
    STAGE_BOTTOM = "stageBottom"
    STAGE_LEFT = "stageLeft"
    DIVIDER = "stageMiddleDashedLine"


class Side(Enum):
    """Horizontal half of the court"""

    LEFT = "left"
    RIGHT = "right"


class Vertical(Enum):
    """Vertical component of a movement"""

    UP = "up"
    DOWN = "down"


class BallDirection(Enum):
    """Compass-style direction tag of the ball"""

    PAUSED = "paused"
    UP_LEFT = "up-left"
    UP_RIGHT = "up-right"
    DOWN_LEFT = "down-left"
    DOWN_RIGHT = "down-right"

    @classmethod
    def compose(cls, vertical: Vertical, side: Side) -> "BallDirection":
        """Builds a moving direction from its two components"""
        return _COMPOSED[(vertical, side)]

    @property
    def vertical(self) -> Vertical | None:
        """Up/down component, None while paused"""
        return _COMPONENTS[self][0]

    @property
    def side(self) -> Side | None:
        """Left/right component, None while paused"""
        return _COMPONENTS[self][1]

    @property
    def displacement(self) -> tuple[int, int]:
        """Sign of the per-tick movement on (x, y)"""
        return _DISPLACEMENTS[self]


_COMPONENTS: dict[BallDirection, tuple[Vertical | None, Side | None]] = {
    BallDirection.PAUSED: (None, None),
    BallDirection.UP_LEFT: (Vertical.UP, Side.LEFT),
    BallDirection.UP_RIGHT: (Vertical.UP, Side.RIGHT),
    BallDirection.DOWN_LEFT: (Vertical.DOWN, Side.LEFT),
    BallDirection.DOWN_RIGHT: (Vertical.DOWN, Side.RIGHT),
}

_COMPOSED: dict[tuple[Vertical, Side], BallDirection] = {
    components: direction
    for direction, components in _COMPONENTS.items()
    if direction is not BallDirection.PAUSED
}

_DISPLACEMENTS: dict[BallDirection, tuple[int, int]] = {
    BallDirection.PAUSED: (0, 0),
    BallDirection.UP_LEFT: (-1, -1),
    BallDirection.UP_RIGHT: (1, -1),
    BallDirection.DOWN_LEFT: (-1, 1),
    BallDirection.DOWN_RIGHT: (1, 1),
}


class PaddleDirection(Enum):
    """Vertical movement of a paddle"""

    UP = "up"
    DOWN = "down"
    IDLE = "idle"

    @property
    def sign(self) -> int:
        return _PADDLE_SIGNS[self]


_PADDLE_SIGNS: dict[PaddleDirection, int] = {
    PaddleDirection.UP: -1,
    PaddleDirection.DOWN: 1,
    PaddleDirection.IDLE: 0,
}


@dataclass
class Box:
    """Axis-aligned bounding box, origin at the top-left corner"""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Box size must be non-negative, got {self.width}x{self.height}"
            )

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass
class Vector2D:
    """Per-axis speed magnitudes, the sign lives in the direction tag"""

    x: float
    y: float

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Speed components must be non-negative, got ({self.x}, {self.y})")

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass
class FillStyle:
    """Fill paint of an entity"""

    color: Color


@dataclass
class StrokeStyle:
    """Outline paint of an entity"""

    color: Color
    width: float = 1.0

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"Stroke width must be non-negative, got {self.width}")


class Entity:
    """
    Generic renderable and updatable game object.

    Each tick the game loop calls update(), which runs the update handlers in
    registration order, then the step() hook, then draws the entity. The
    collision detector calls collide() with every watched entity overlapping
    this one.
    """

    def __init__(
        self,
        entity_id: str,
        box: Box | None = None,
        fill: FillStyle | None = None,
        stroke: StrokeStyle | None = None,
    ):
        if not entity_id:
            raise ValueError("Entity id must be a non-empty string")

        self.id = entity_id
        self.box = box if box is not None else Box()
        self.fill = fill
        self.stroke = stroke
        self.surface: RenderSurface | None = None
        self.update_handlers: list[UpdateHandler] = []
        self.collision_handlers: list[CollisionHandler] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r}, {self.box})"

    def set_surface(self, surface: RenderSurface) -> None:
        """Attaches the surface the entity draws itself on"""
        self.surface = surface

    def add_update_handler(self, handler: UpdateHandler) -> None:
        self.update_handlers.append(handler)

    def add_collision_handler(self, handler: CollisionHandler) -> None:
        self.collision_handlers.append(handler)

    def update(self) -> None:
        """Runs one tick: update handlers, step, draw"""
        for handler in self.update_handlers:
            handler.on_update()

        self.step()

        if self.surface is not None:
            self.draw(self.surface)

    def collide(self, others: list["Entity"]) -> None:
        """Forwards an overlap set to every collision handler"""
        for handler in self.collision_handlers:
            handler.on_collision(others)

    def step(self) -> None:
        """Built-in per-tick behaviour, run after the update handlers"""

    def draw(self, surface: RenderSurface) -> None:
        """Draws the entity box with its style"""
        surface.rect(*self.box.to_tuple())
        self.apply_style(surface)

    def apply_style(self, surface: RenderSurface) -> None:
        """Paints the current path with the entity fill then stroke"""
        if self.fill is not None:
            surface.fill(self.fill.color)

        if self.stroke is not None:
            surface.stroke(self.stroke.color, self.stroke.width)


class Paddle(Entity):
    """Player paddle, moved vertically by its controller"""

    def __init__(
        self,
        entity_id: str,
        x: float = 0.0,
        y: float = 0.0,
        width: float | None = None,
        height: float | None = None,
        speed: float | None = None,
        color: Color | None = None,
    ):
        box = Box(
            x,
            y,
            width if width is not None else game_config.PADDLE_WIDTH,
            height if height is not None else game_config.PADDLE_HEIGHT,
        )
        super().__init__(
            entity_id, box, fill=FillStyle(color or game_config.FOREGROUND_COLOR)
        )
        self.direction = PaddleDirection.IDLE
        self._speed = 0.0
        self.speed = speed if speed is not None else game_config.PADDLE_IDLE_SPEED

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"Paddle speed must be non-negative, got {value}")
        self._speed = value

    def step(self) -> None:
        """Moves the paddle by its speed in its direction"""
        self.box.y += self.direction.sign * self.speed

    def clamp(self, field_height: float, margin: float) -> None:
        """Keeps the paddle inside [margin, field_height - height - margin]"""
        if self.box.y <= margin:
            self.box.y = margin

        if self.box.y >= field_height - self.box.height - margin:
            self.box.y = field_height - self.box.height - margin


class BallMotion:
    """Update handler moving the ball along its direction"""

    def __init__(self, ball: "Ball"):
        self.ball = ball

    def on_update(self) -> None:
        dx, dy = self.ball.direction.displacement
        self.ball.box.x += dx * self.ball.speed.x
        self.ball.box.y += dy * self.ball.speed.y


class BallBounceRules:
    """
    Collision handler applying the bounce and goal rules of the ball.

    Rules are looked up per overlapping entity, in the order the collision
    detector delivered them, so a later rule can overwrite the direction set
    by an earlier one during the same tick.
    """

    def __init__(self, ball: "Ball"):
        self.ball = ball
        self.rules = {
            Tag.PLAYER_A: self.hit_left_paddle,
            Tag.PLAYER_B: self.hit_right_paddle,
            Tag.STAGE_TOP: self.hit_top,
            Tag.STAGE_BOTTOM: self.hit_bottom,
            Tag.STAGE_RIGHT: self.hit_right_goal,
            Tag.STAGE_LEFT: self.hit_left_goal,
        }

    def on_collision(self, others: list[Entity]) -> None:
        for other in others:
            rule = self.rules.get(other.id)
            if rule is not None:
                rule()

    def _vertical(self) -> Vertical:
        # A paused ball counts as moving down-left
        return self.ball.direction.vertical or Vertical.DOWN

    def _side(self) -> Side:
        return self.ball.direction.side or Side.LEFT

    def hit_left_paddle(self) -> None:
        self.ball.direction = BallDirection.compose(self._vertical(), Side.RIGHT)
        self.ball.randomize_speed()
        logger.debug("Ball hit the left paddle, speed %s", self.ball.speed.to_tuple())

    def hit_right_paddle(self) -> None:
        self.ball.direction = BallDirection.compose(self._vertical(), Side.LEFT)
        self.ball.randomize_speed()
        logger.debug("Ball hit the right paddle, speed %s", self.ball.speed.to_tuple())

    def hit_top(self) -> None:
        self.ball.direction = BallDirection.compose(Vertical.DOWN, self._side())

    def hit_bottom(self) -> None:
        self.ball.direction = BallDirection.compose(Vertical.UP, self._side())

    def hit_right_goal(self) -> None:
        self.ball.notify_goal(Side.LEFT)
        self.ball.random_start(Side.LEFT)

    def hit_left_goal(self) -> None:
        self.ball.notify_goal(Side.RIGHT)
        self.ball.random_start(Side.RIGHT)


class Ball(Entity):
    """
    Game ball.

    Moves by speed.x/speed.y per tick along its direction tag. After a goal it
    is placed back around the center, frozen for a short delay, then launched
    toward the player who conceded.
    """

    def __init__(
        self,
        entity_id: str = Tag.BALL,
        *,
        field_width: float | None = None,
        field_height: float | None = None,
        scheduler: "Scheduler | None" = None,
        rng: np.random.Generator | None = None,
        size: float | None = None,
        color: Color | None = None,
    ):
        side = size if size is not None else game_config.BALL_SIZE
        super().__init__(
            entity_id,
            Box(0.0, 0.0, side, side),
            fill=FillStyle(color or game_config.FOREGROUND_COLOR),
        )
        self.field_width = field_width if field_width is not None else game_config.FIELD_WIDTH
        self.field_height = (
            field_height if field_height is not None else game_config.FIELD_HEIGHT
        )
        self.scheduler = scheduler
        self.rng = rng if rng is not None else np.random.default_rng()

        self.default_speed = game_config.BALL_SPEED
        self.bounce_speed_range = (
            game_config.BALL_MIN_BOUNCE_SPEED,
            game_config.BALL_MAX_BOUNCE_SPEED,
        )
        self.reset_delay = game_config.RESET_DELAY_MS / 1000

        self._speed = Vector2D(self.default_speed, self.default_speed)
        self.direction = BallDirection.PAUSED
        self.goal_handlers: list[GoalHandler] = []
        self.pending_launch: "TimerHandle | None" = None

        self.add_update_handler(BallMotion(self))
        self.add_collision_handler(BallBounceRules(self))

    @property
    def speed(self) -> Vector2D:
        return self._speed

    @speed.setter
    def speed(self, value: Vector2D) -> None:
        # Re-validate, the vector may have been mutated since it was built
        self._speed = Vector2D(value.x, value.y)

    def add_goal_handler(self, handler: GoalHandler) -> None:
        self.goal_handlers.append(handler)

    def notify_goal(self, scorer: Side) -> None:
        for handler in self.goal_handlers:
            handler.on_goal(scorer)

    def randomize_speed(self) -> None:
        """Draws each axis speed independently from the bounce range"""
        low, high = self.bounce_speed_range
        self.speed = Vector2D(
            float(self.rng.integers(low, high, endpoint=True)),
            float(self.rng.integers(low, high, endpoint=True)),
        )

    def random_start(self, side: Side = Side.LEFT) -> None:
        """
        Puts the ball back in play.

        The ball is centered horizontally at a random whole-pixel height within the
        middle half of the field and frozen; after the reset delay it starts
        moving toward `side` with a random vertical component.

        Args:
            side: Horizontal component of the launch direction
        """
        if self.scheduler is None:
            raise GameConfigurationError(f"Ball {self.id!r} needs a scheduler to be restarted")

        quarter_y = int(self.field_height // 4)
        vertical = (Vertical.UP, Vertical.DOWN)[int(self.rng.integers(0, 2))]

        self.box.x = self.field_width / 2 - self.box.width / 2
        self.box.y = float(
            self.rng.integers(quarter_y, int(self.field_height) - quarter_y, endpoint=True)
        )
        self.speed = Vector2D(self.default_speed, self.default_speed)
        self.direction = BallDirection.PAUSED

        if self.pending_launch is not None:
            self.pending_launch.cancel()

        launch_direction = BallDirection.compose(vertical, side)
        self.pending_launch = self.scheduler.call_later(
            self.reset_delay, lambda: self._launch(launch_direction)
        )

    def _launch(self, direction: BallDirection) -> None:
        self.pending_launch = None
        self.direction = direction
        logger.debug("Ball launched %s", direction.value)


class StageLimit(Entity):
    """Invisible wall or goal line of the stage"""


class DashedLine(Entity):
    """Vertical dashed line splitting the court in two halves"""

    def __init__(
        self,
        entity_id: str = Tag.DIVIDER,
        dash_pattern: Sequence[float] | None = None,
        color: Color | None = None,
        width: float = 1.0,
    ):
        super().__init__(
            entity_id,
            stroke=StrokeStyle(color or game_config.FOREGROUND_COLOR, width),
        )
        self.dash_pattern = tuple(dash_pattern or game_config.DASH_PATTERN)

    def draw(self, surface: RenderSurface) -> None:
        center_x = surface.width / 2
        self.box = Box(center_x, 0.0, 0.0, surface.height)

        surface.set_line_dash(self.dash_pattern)
        if self.stroke is not None:
            surface.line_width = self.stroke.width
        surface.move_to(center_x, 0)
        surface.line_to(center_x, surface.height)
        self.apply_style(surface)
        surface.set_line_dash(())
