"""
Shared fixtures for Canvas Pong tests
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
import pytest

from canvas_pong.core.match import Match
from canvas_pong.core.scheduler import Scheduler


class RecordingSurface:
    """Render surface double that records every drawing call"""

    def __init__(self, width: int = 700, height: int = 400):
        self.width = width
        self.height = height
        self.line_width = 1.0
        self.calls: list[tuple[Any, ...]] = []

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.calls.append(("clear_rect", x, y, width, height))

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self.calls.append(("rect", x, y, width, height))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", x, y))

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        self.calls.append(("set_line_dash", tuple(pattern)))

    def fill(self, color: tuple[int, int, int]) -> None:
        self.calls.append(("fill", color))

    def stroke(self, color: tuple[int, int, int], width: float | None = None) -> None:
        self.calls.append(("stroke", color, width))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def match(surface: RecordingSurface, scheduler: Scheduler, rng: np.random.Generator) -> Match:
    return Match(surface, scheduler=scheduler, rng=rng)
