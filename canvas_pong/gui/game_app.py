"""
Main game application with PyGame GUI
"""

import logging
import sys
import traceback
from collections.abc import Callable
from dataclasses import dataclass

import pygame

from canvas_pong.core.controllers import Difficulty
from canvas_pong.core.match import Match
from canvas_pong.gui.menu import MenuController
from canvas_pong.gui.menu import MenuView
from canvas_pong.gui.pygame_surface import PygameSurface
from canvas_pong.utils.config import game_config

logger = logging.getLogger(__name__)


@dataclass
class Button:
    """Clickable menu entry with a keyboard shortcut"""

    label: str
    key: int
    action: Callable[[], None]
    rect: pygame.Rect | None = None


class CanvasPongApp:
    """Main application class for Canvas Pong with PyGame GUI"""

    def __init__(self) -> None:
        """Initialize the application"""
        pygame.init()

        self.width = game_config.FIELD_WIDTH
        self.height = game_config.FIELD_HEIGHT
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Canvas Pong")
        self.clock = pygame.time.Clock()

        # The match draws on its own canvas, menus are drawn over a copy of it
        self.canvas = pygame.Surface((self.width, self.height))
        self.surface = PygameSurface(self.canvas)
        self.match = Match(self.surface, fps=game_config.FPS)
        self.menu = MenuController(self.match)

        self.text_color = game_config.FOREGROUND_COLOR
        self.highlight_color: tuple[int, int, int] = (255, 255, 0)
        self.font_large = pygame.font.Font(None, 74)
        self.font_medium = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 30)

        self.buttons: dict[MenuView, list[Button]] = {
            MenuView.NEW_GAME: [
                Button("1 - Easy", pygame.K_1, lambda: self.menu.select_difficulty(Difficulty.EASY)),
                Button(
                    "2 - Normal", pygame.K_2, lambda: self.menu.select_difficulty(Difficulty.MEDIUM)
                ),
                Button("3 - Hard", pygame.K_3, lambda: self.menu.select_difficulty(Difficulty.HARD)),
            ],
            MenuView.PAUSE_GAME: [
                Button("R - Resume", pygame.K_r, self.menu.resume_game),
                Button("N - New game", pygame.K_n, self.menu.new_game),
            ],
            MenuView.WINNER: [
                Button("N - New game", pygame.K_n, self.menu.new_game),
            ],
            MenuView.GAME_PLAY: [],
        }
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event to the match or the menu"""
        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.MOUSEMOTION:
            self.match.on_pointer_move(*event.pos)

        elif event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
            self.menu.on_escape()

        elif event.type == pygame.KEYDOWN:
            for button in self.buttons[self.menu.active_view]:
                if event.key == button.key:
                    button.action()
                    break

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for button in self.buttons[self.menu.active_view]:
                if button.rect is not None and button.rect.collidepoint(event.pos):
                    button.action()
                    break

    def draw_score(self) -> None:
        """Draw both players' names and points"""
        score = self.match.score
        columns = (
            (game_config.PLAYER_A_NAME, score.player_a, self.width // 4),
            (game_config.PLAYER_B_NAME, score.player_b, 3 * self.width // 4),
        )
        for name, points, center_x in columns:
            points_surface = self.font_medium.render(str(points), True, self.text_color)
            points_rect = points_surface.get_rect(centerx=center_x, top=15)
            self.screen.blit(points_surface, points_rect)

            name_surface = self.font_small.render(name, True, self.text_color)
            name_rect = name_surface.get_rect(centerx=center_x, top=points_rect.bottom + 2)
            self.screen.blit(name_surface, name_rect)

    def draw_menu(self, view: MenuView) -> None:
        """Draw the overlay of a menu view"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(180)
        overlay.fill(game_config.BACKGROUND_COLOR)
        self.screen.blit(overlay, (0, 0))

        if view is MenuView.NEW_GAME:
            title = "PONG"
        elif view is MenuView.PAUSE_GAME:
            title = "PAUSE"
        else:
            title = f"{self.menu.winner_name} wins!"

        title_surface = self.font_large.render(title, True, self.text_color)
        title_rect = title_surface.get_rect(center=(self.width // 2, self.height // 4))
        self.screen.blit(title_surface, title_rect)

        mouse_pos = pygame.mouse.get_pos()
        for i, button in enumerate(self.buttons[view]):
            label_surface = self.font_medium.render(button.label, True, self.text_color)
            button.rect = label_surface.get_rect(
                center=(self.width // 2, self.height // 2 + i * 55)
            )
            if button.rect.collidepoint(mouse_pos):
                label_surface = self.font_medium.render(button.label, True, self.highlight_color)
            self.screen.blit(label_surface, button.rect)

    def render(self) -> None:
        """Compose the match frame, the score and the active menu"""
        self.screen.blit(self.canvas, (0, 0))
        self.draw_score()

        if self.menu.active_view is not MenuView.GAME_PLAY:
            self.draw_menu(self.menu.active_view)

        pygame.display.flip()

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Canvas Pong...")
        self.menu.run()

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                # Ticks and the ball freeze run on the match scheduler
                elapsed_ms = self.clock.tick(game_config.FPS)
                self.match.scheduler.advance(elapsed_ms / 1000)

                self.render()

        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        self.match.stop()
        pygame.quit()
        logger.info("Canvas Pong closed properly.")


def main() -> None:
    """Main entry point"""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        app = CanvasPongApp()
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
