"""
Core module of Canvas Pong game
"""

from canvas_pong.core.collision import CollisionDetector
from canvas_pong.core.controllers import BotController
from canvas_pong.core.controllers import BotMode
from canvas_pong.core.controllers import Difficulty
from canvas_pong.core.controllers import HumanController
from canvas_pong.core.entities import Ball
from canvas_pong.core.entities import BallDirection
from canvas_pong.core.entities import Box
from canvas_pong.core.entities import DashedLine
from canvas_pong.core.entities import Entity
from canvas_pong.core.entities import Paddle
from canvas_pong.core.entities import PaddleDirection
from canvas_pong.core.entities import Side
from canvas_pong.core.entities import StageLimit
from canvas_pong.core.entities import Tag
from canvas_pong.core.errors import CanvasPongError
from canvas_pong.core.errors import GameConfigurationError
from canvas_pong.core.game_loop import GameLoop
from canvas_pong.core.match import Match
from canvas_pong.core.match import Score
from canvas_pong.core.scheduler import Scheduler

__all__ = [
    "Ball",
    "BallDirection",
    "BotController",
    "BotMode",
    "Box",
    "CanvasPongError",
    "CollisionDetector",
    "DashedLine",
    "Difficulty",
    "Entity",
    "GameConfigurationError",
    "GameLoop",
    "HumanController",
    "Match",
    "Paddle",
    "PaddleDirection",
    "Scheduler",
    "Score",
    "Side",
    "StageLimit",
    "Tag",
]
