"""
Protocols implemented by Canvas Pong components and their collaborators
"""

from canvas_pong.core.interfaces.handlers import CollisionHandler
from canvas_pong.core.interfaces.handlers import CollisionListener
from canvas_pong.core.interfaces.handlers import GoalHandler
from canvas_pong.core.interfaces.handlers import ScoreHandler
from canvas_pong.core.interfaces.handlers import TickObserver
from canvas_pong.core.interfaces.handlers import UpdateHandler
from canvas_pong.core.interfaces.renderer import Color
from canvas_pong.core.interfaces.renderer import RenderSurface

__all__ = [
    "Color",
    "RenderSurface",
    "UpdateHandler",
    "CollisionHandler",
    "CollisionListener",
    "TickObserver",
    "GoalHandler",
    "ScoreHandler",
]
