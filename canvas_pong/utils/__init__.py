"""
Canvas Pong utilities
"""

from canvas_pong.utils.config import GameConfig
from canvas_pong.utils.config import game_config
from canvas_pong.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig"]
