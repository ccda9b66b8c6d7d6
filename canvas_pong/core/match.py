"""
Pong match: composition of the court, the players and the score
"""

import logging
from dataclasses import dataclass

import numpy as np

from canvas_pong.core.collision import CollisionDetector
from canvas_pong.core.controllers import BotController
from canvas_pong.core.controllers import Difficulty
from canvas_pong.core.controllers import HumanController
from canvas_pong.core.entities import Ball
from canvas_pong.core.entities import Box
from canvas_pong.core.entities import DashedLine
from canvas_pong.core.entities import Paddle
from canvas_pong.core.entities import Side
from canvas_pong.core.entities import StageLimit
from canvas_pong.core.entities import Tag
from canvas_pong.core.errors import GameConfigurationError
from canvas_pong.core.game_loop import GameLoop
from canvas_pong.core.interfaces.handlers import CollisionListener
from canvas_pong.core.interfaces.handlers import GoalHandler
from canvas_pong.core.interfaces.handlers import ScoreHandler
from canvas_pong.core.interfaces.renderer import RenderSurface
from canvas_pong.core.scheduler import Scheduler
from canvas_pong.utils.config import game_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Score:
    """Points of the left (A) and right (B) players"""

    player_a: int = 0
    player_b: int = 0

    def __post_init__(self) -> None:
        if self.player_a < 0 or self.player_b < 0:
            raise ValueError(f"Scores must be non-negative, got {self.player_a}-{self.player_b}")

    def add_point(self, scorer: Side) -> "Score":
        if scorer is Side.LEFT:
            return Score(self.player_a + 1, self.player_b)
        return Score(self.player_a, self.player_b + 1)

    def winner(self, threshold: int) -> Side | None:
        """Side of the player who reached the threshold, if any"""
        if self.player_a >= threshold:
            return Side.LEFT
        if self.player_b >= threshold:
            return Side.RIGHT
        return None


class Match:
    """
    A human-versus-bot pong match on a render surface.

    The human drives the left paddle (playerA) with the pointer, the bot
    drives the right one (playerB). The ball scores for player A when it
    reaches the right goal line and for player B on the left one.
    """

    def __init__(
        self,
        surface: RenderSurface | None,
        scheduler: Scheduler | None = None,
        fps: int | None = None,
        difficulty: Difficulty | float = Difficulty.MEDIUM,
        rng: np.random.Generator | None = None,
    ):
        if surface is None:
            raise GameConfigurationError("A render surface is required to create a match")

        self.surface = surface
        self.width = surface.width
        self.height = surface.height
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.loop = GameLoop(surface, self.scheduler, fps)
        self.collision_detector = CollisionDetector()

        self._score = Score()
        self.score_handlers: list[ScoreHandler] = []

        self.create_stage_limits()
        self.create_players(difficulty)
        self.create_divider()
        self.loop.add_observer(self.collision_detector)

    @property
    def score(self) -> Score:
        return self._score

    def create_stage_limits(self) -> None:
        """Walls at the top and bottom, goal lines at the left and right"""
        thickness = game_config.STAGE_LIMIT_THICKNESS
        goal_width = game_config.GOAL_LINE_THICKNESS

        self.stage_top = StageLimit(Tag.STAGE_TOP, Box(0, 0, self.width, thickness))
        self.stage_right = StageLimit(Tag.STAGE_RIGHT, Box(self.width, 0, goal_width, self.height))
        self.stage_bottom = StageLimit(
            Tag.STAGE_BOTTOM, Box(0, self.height, self.width, thickness)
        )
        self.stage_left = StageLimit(Tag.STAGE_LEFT, Box(0, 0, goal_width, self.height))

        limits = (self.stage_top, self.stage_right, self.stage_bottom, self.stage_left)
        self.collision_detector.watch(*limits)
        self.loop.register(*limits)

    def create_players(self, difficulty: Difficulty | float) -> None:
        """Ball, both paddles and their controllers"""
        self.ball = Ball(
            Tag.BALL,
            field_width=self.width,
            field_height=self.height,
            scheduler=self.scheduler,
            rng=self.rng,
        )
        self.ball.add_goal_handler(self)

        paddle_height = game_config.PADDLE_HEIGHT
        centered_y = self.height / 2 - paddle_height / 2
        self.player_a = Paddle(Tag.PLAYER_A, x=game_config.PADDLE_OFFSET, y=centered_y)
        self.player_b = Paddle(
            Tag.PLAYER_B,
            x=self.width - game_config.PADDLE_OFFSET - game_config.PADDLE_WIDTH,
            y=centered_y,
        )

        self.collision_detector.watch(self.ball, self.player_a, self.player_b)
        self.loop.register(self.player_a, self.player_b, self.ball)

        self.human = HumanController(self.player_a, self.height)
        self.bot = BotController(
            self.player_b, self.ball, self.width, self.height, difficulty=difficulty
        )

    def create_divider(self) -> None:
        self.divider = DashedLine(Tag.DIVIDER)
        self.loop.register(self.divider)

    def add_score_handler(self, handler: ScoreHandler) -> None:
        self.score_handlers.append(handler)

    def add_goal_handler(self, handler: GoalHandler) -> None:
        """Subscribes to ball-scored events, after the score was updated"""
        self.ball.add_goal_handler(handler)

    def add_collision_listener(self, listener: CollisionListener) -> None:
        self.collision_detector.add_listener(listener)

    def notify_score(self) -> None:
        for handler in self.score_handlers:
            handler.on_score(self._score)

    def on_goal(self, scorer: Side) -> None:
        self._score = self._score.add_point(scorer)
        logger.info(
            "Point for the %s player, score %d-%d",
            scorer.value,
            self._score.player_a,
            self._score.player_b,
        )
        self.notify_score()

    def on_pointer_move(self, x: float, y: float) -> None:
        self.human.on_pointer_move(x, y)

    def set_difficulty(self, difficulty: Difficulty | float) -> None:
        self.bot.set_difficulty(difficulty)

    def winner(self, threshold: int | None = None) -> Side | None:
        return self._score.winner(threshold if threshold is not None else game_config.WIN_SCORE)

    def start(self) -> None:
        """Serves the ball and starts the tick timer, the loop stays paused"""
        self.ball.random_start(Side.LEFT)
        self.loop.start()

    def stop(self) -> None:
        self.loop.stop()

    def reset(self) -> None:
        """Starts a new game: zero score, new serve, resume ticking"""
        self._score = Score()
        self.notify_score()
        self.ball.random_start(Side.LEFT)
        self.resume()
        logger.info("New game started")

    def pause(self) -> None:
        self.loop.pause()

    def resume(self) -> None:
        self.loop.resume()

    def is_paused(self) -> bool:
        return self.loop.is_paused()
