"""
Menu state machine sequencing the views around a match
"""

import logging
from enum import Enum
from typing import Protocol

from canvas_pong.core.controllers import Difficulty
from canvas_pong.core.entities import Side
from canvas_pong.core.match import Match
from canvas_pong.core.match import Score
from canvas_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class MenuView(Enum):
    """Views shown over the court"""

    NEW_GAME = "NewGame"
    GAME_PLAY = "GamePlay"
    PAUSE_GAME = "PauseGame"
    WINNER = "Winner"


class ViewListener(Protocol):
    """Notified every time the active view changes"""

    def on_view_change(self, view: MenuView) -> None: ...


class MenuController:
    """
    Presentation state of the game.

    NewGame --difficulty--> GamePlay --escape--> PauseGame --resume--> GamePlay
    GamePlay --win threshold--> Winner; PauseGame/Winner --new game--> NewGame
    """

    def __init__(
        self,
        match: Match,
        score_to_win: int | None = None,
        player_names: dict[Side, str] | None = None,
    ):
        self.match = match
        self.score_to_win = score_to_win if score_to_win is not None else game_config.WIN_SCORE
        if self.score_to_win <= 0:
            raise ValueError(f"score_to_win must be positive, got {self.score_to_win}")

        self.player_names = player_names or {
            Side.LEFT: game_config.PLAYER_A_NAME,
            Side.RIGHT: game_config.PLAYER_B_NAME,
        }
        self.active_view = MenuView.NEW_GAME
        self.winner_name: str | None = None
        self.view_listeners: list[ViewListener] = []

    def add_view_listener(self, listener: ViewListener) -> None:
        self.view_listeners.append(listener)

    def run(self) -> None:
        """Subscribes to the score and starts the match behind the new game view"""
        self.match.add_score_handler(self)
        self.match.start()
        self.change_active_view(MenuView.NEW_GAME)

    def change_active_view(self, view: MenuView) -> None:
        self.active_view = view
        for listener in self.view_listeners:
            listener.on_view_change(view)

    def select_difficulty(self, difficulty: Difficulty | float) -> None:
        """Starts a game against the bot at the given difficulty"""
        self.winner_name = None
        self.match.set_difficulty(difficulty)
        self.change_active_view(MenuView.GAME_PLAY)
        self.match.reset()

    def set_winner(self, player_name: str) -> None:
        self.match.pause()
        self.winner_name = player_name
        logger.info("%s wins", player_name)
        self.change_active_view(MenuView.WINNER)

    def on_score(self, score: Score) -> None:
        # Only the first player to reach the threshold wins
        if self.winner_name is not None:
            return

        if score.player_a == self.score_to_win:
            self.set_winner(self.player_names[Side.LEFT])
        elif score.player_b == self.score_to_win:
            self.set_winner(self.player_names[Side.RIGHT])

    def on_escape(self) -> None:
        """Pauses a running game"""
        if self.active_view is MenuView.GAME_PLAY:
            self.match.pause()
            self.change_active_view(MenuView.PAUSE_GAME)

    def resume_game(self) -> None:
        if self.active_view is MenuView.PAUSE_GAME:
            self.match.resume()
            self.change_active_view(MenuView.GAME_PLAY)

    def new_game(self) -> None:
        """Clears the score and goes back to the difficulty selection"""
        self.winner_name = None
        self.match.reset()
        self.match.pause()
        self.change_active_view(MenuView.NEW_GAME)
