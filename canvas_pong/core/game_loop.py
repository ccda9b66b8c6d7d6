"""
Canvas Pong fixed-rate game loop
"""

import logging

from canvas_pong.core.entities import Entity
from canvas_pong.core.errors import GameConfigurationError
from canvas_pong.core.interfaces.handlers import TickObserver
from canvas_pong.core.interfaces.renderer import RenderSurface
from canvas_pong.core.scheduler import Scheduler
from canvas_pong.core.scheduler import TimerHandle
from canvas_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Ticks registered entities at a fixed rate and renders them.

    A tick clears the surface, runs the observers (the collision pass) and
    then updates every entity, all in registration order. The loop starts
    paused so the menu can be shown before the first frame.
    """

    def __init__(
        self,
        surface: RenderSurface | None,
        scheduler: Scheduler,
        fps: int | None = None,
    ):
        if surface is None:
            raise GameConfigurationError("A render surface is required to run the game loop")

        self.surface = surface
        self.scheduler = scheduler
        self.fps = fps if fps is not None else game_config.FPS
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

        self.entities: list[Entity] = []
        self.observers: list[TickObserver] = []
        self.paused = True
        self.tick_count = 0
        self._timer: TimerHandle | None = None

    @property
    def running(self) -> bool:
        """Whether the tick timer is active"""
        return self._timer is not None

    def is_paused(self) -> bool:
        return self.paused

    def register(self, *entities: Entity) -> None:
        """Adds entities to the update and render pass"""
        for entity in entities:
            entity.set_surface(self.surface)
            self.entities.append(entity)

    def add_observer(self, observer: TickObserver) -> None:
        self.observers.append(observer)

    def start(self) -> None:
        """Starts ticking, replacing any previous timer"""
        if self._timer is not None:
            self._timer.cancel()

        self._timer = self.scheduler.call_every(1 / self.fps, self.tick)
        logger.info("Game loop started at %d ticks per second", self.fps)

    def stop(self) -> None:
        """Stops ticking, no-op when not started"""
        if self._timer is None:
            return

        self._timer.cancel()
        self._timer = None
        logger.info("Game loop stopped after %d ticks", self.tick_count)

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def tick(self) -> None:
        """Runs one update and render pass, skipped while paused"""
        if self.paused:
            return

        self.tick_count += 1
        self.surface.clear_rect(0, 0, self.surface.width, self.surface.height)

        for observer in self.observers:
            observer.on_tick()

        for entity in self.entities:
            self.surface.begin_path()
            entity.update()
