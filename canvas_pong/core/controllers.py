"""
Paddle controllers: rule-based bot and pointer-driven human player
"""

import logging
from enum import Enum

from canvas_pong.core.entities import Ball
from canvas_pong.core.entities import Paddle
from canvas_pong.core.entities import PaddleDirection
from canvas_pong.core.entities import Side
from canvas_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class BotMode(Enum):
    """Bot behaviour: patrol while the ball is away, chase it once on our half"""

    IDLE = "idle"
    ATTACK = "attack"


class Difficulty(Enum):
    """Preset difficulty tiers, multipliers are read from the game config"""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def multiplier(self) -> float:
        return game_config.difficulty_tiers[self.value]


class BallWatcher:
    """Ball update handler switching the bot mode from the ball position"""

    def __init__(self, bot: "BotController"):
        self.bot = bot

    def on_update(self) -> None:
        self.bot.watch_ball()


class BotController:
    """
    Drives a paddle against the ball.

    The bot attacks when the ball is on its half of the court, moving toward
    the ball at a fraction of the ball vertical speed given by the difficulty.
    Otherwise it patrols between the top and bottom bounds at a fixed speed,
    reversing at each bound without ever stopping.
    """

    def __init__(
        self,
        paddle: Paddle,
        ball: Ball,
        field_width: float,
        field_height: float,
        difficulty: Difficulty | float = Difficulty.MEDIUM,
        margin: float | None = None,
        idle_speed: float | None = None,
    ):
        self.paddle = paddle
        self.ball = ball
        self.field_width = field_width
        self.field_height = field_height
        self.margin = margin if margin is not None else game_config.BOUNDARY_MARGIN
        self.idle_speed = idle_speed if idle_speed is not None else game_config.PADDLE_IDLE_SPEED
        self.mode = BotMode.IDLE
        self.difficulty = 0.0
        self.set_difficulty(difficulty)

        # Start the patrol
        if self.paddle.direction is PaddleDirection.IDLE:
            self.paddle.direction = PaddleDirection.DOWN

        self._behaviours = {
            BotMode.IDLE: self.idle,
            BotMode.ATTACK: self.attack,
        }

        paddle.add_update_handler(self)
        ball.add_update_handler(BallWatcher(self))

    @property
    def side(self) -> Side:
        """Half of the court the paddle defends"""
        return Side.LEFT if self.paddle.box.x < self.field_width / 2 else Side.RIGHT

    @property
    def lower_bound(self) -> float:
        return self.field_height - self.paddle.box.height - self.margin

    def set_difficulty(self, difficulty: Difficulty | float) -> None:
        """
        Sets how closely the paddle speed tracks the ball vertical speed.

        Args:
            difficulty: A preset tier or a multiplier in (0, 1]
        """
        value = difficulty.multiplier if isinstance(difficulty, Difficulty) else difficulty
        if not 0 < value <= 1:
            raise ValueError(f"Difficulty must be in (0, 1], got {value}")

        self.difficulty = value
        logger.info("Bot difficulty set to %.2f", value)

    def set_mode(self, mode: BotMode) -> None:
        self.mode = mode

    def watch_ball(self) -> None:
        """Switches to attack while the ball is on our half"""
        middle = self.field_width / 2
        ball_x = self.ball.box.x

        if (self.side is Side.RIGHT and ball_x >= middle) or (
            self.side is Side.LEFT and ball_x <= middle
        ):
            self.set_mode(BotMode.ATTACK)
        else:
            self.set_mode(BotMode.IDLE)

    def on_update(self) -> None:
        self._behaviours[self.mode]()

    def idle(self) -> None:
        self.paddle.speed = self.idle_speed

        if self.paddle.box.y <= self.margin:
            self.paddle.direction = PaddleDirection.DOWN

        if self.paddle.box.y >= self.lower_bound:
            self.paddle.direction = PaddleDirection.UP

    def attack(self) -> None:
        if self.ball.box.y > self.paddle.box.center_y:
            self.paddle.direction = PaddleDirection.DOWN
        else:
            self.paddle.direction = PaddleDirection.UP

        self.paddle.speed = self.ball.speed.y * self.difficulty
        self.paddle.clamp(self.field_height, self.margin)


class HumanController:
    """Centers a paddle on the pointer, within the stage bounds"""

    def __init__(self, paddle: Paddle, field_height: float, margin: float | None = None):
        self.paddle = paddle
        self.field_height = field_height
        self.margin = margin if margin is not None else game_config.BOUNDARY_MARGIN

    def on_pointer_move(self, x: float, y: float) -> None:
        """
        Args:
            x: Pointer x relative to the surface (unused, paddles only move vertically)
            y: Pointer y relative to the surface
        """
        self.paddle.box.y = y - self.paddle.box.height / 2
        self.paddle.clamp(self.field_height, self.margin)
