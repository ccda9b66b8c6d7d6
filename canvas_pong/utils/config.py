"""
Canvas Pong game configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Drawing surface
    FIELD_WIDTH: int = Field(default=700, gt=0, description="Surface width in pixels")
    FIELD_HEIGHT: int = Field(default=400, gt=0, description="Surface height in pixels")
    BOUNDARY_MARGIN: float = Field(
        default=5.0, ge=0, description="Gap kept between paddles and top/bottom edges"
    )
    STAGE_LIMIT_THICKNESS: float = Field(
        default=5.0, gt=0, description="Height of the top and bottom stage limits"
    )
    GOAL_LINE_THICKNESS: float = Field(
        default=1.0, gt=0, description="Width of the left and right stage limits"
    )

    # Ball
    BALL_SIZE: float = Field(default=10.0, gt=0, description="Ball side in pixels")
    BALL_SPEED: float = Field(default=5.0, gt=0, description="Speed per axis after a reset")
    BALL_MIN_BOUNCE_SPEED: int = Field(default=5, gt=0, description="Lowest speed after a hit")
    BALL_MAX_BOUNCE_SPEED: int = Field(default=10, gt=0, description="Highest speed after a hit")
    RESET_DELAY_MS: int = Field(default=150, ge=0, description="Freeze after a goal")

    # Paddles
    PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_OFFSET: float = Field(default=20.0, ge=0, description="Paddle distance from side")
    PADDLE_IDLE_SPEED: float = Field(default=3.0, gt=0, description="Bot patrol speed")

    # Bot difficulty tiers
    DIFFICULTY_EASY: float = Field(default=0.5, gt=0, le=1.0, description="Easy tier")
    DIFFICULTY_MEDIUM: float = Field(default=0.6, gt=0, le=1.0, description="Medium tier")
    DIFFICULTY_HARD: float = Field(default=0.85, gt=0, le=1.0, description="Hard tier")

    # Gameplay
    WIN_SCORE: int = Field(default=15, gt=0, description="Winning score")
    PLAYER_A_NAME: str = Field(default="Player", min_length=1, description="Left player")
    PLAYER_B_NAME: str = Field(default="Computer", min_length=1, description="Right player")

    # Display
    FPS: int = Field(default=60, gt=0, description="Ticks per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="RGB color"
    )
    DASH_PATTERN: tuple[int, int] = Field(default=(5, 15), description="Divider dash/gap")

    @field_validator("BALL_MAX_BOUNCE_SPEED")
    @classmethod
    def validate_bounce_speed(cls, v: int, info: ValidationInfo) -> int:
        """Validate that the bounce speed range is ordered"""
        min_speed = info.data.get("BALL_MIN_BOUNCE_SPEED", 5) if info.data else 5
        if v < min_speed:
            raise ValueError(
                f"BALL_MAX_BOUNCE_SPEED ({v}) must not be below BALL_MIN_BOUNCE_SPEED ({min_speed})"
            )
        return v

    @field_validator("DASH_PATTERN")
    @classmethod
    def validate_dash_pattern(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Validate the divider dash pattern"""
        if min(v) < 0 or sum(v) == 0:
            raise ValueError(f"DASH_PATTERN {v} needs non-negative lengths and a non-zero sum")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 2 * (self.PADDLE_OFFSET + self.PADDLE_WIDTH) + self.BALL_SIZE
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        min_height = self.PADDLE_HEIGHT + 2 * self.BOUNDARY_MARGIN
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height} pixels")

        return self

    @property
    def difficulty_tiers(self) -> dict[str, float]:
        """Difficulty tiers in menu order"""
        return {
            "easy": self.DIFFICULTY_EASY,
            "medium": self.DIFFICULTY_MEDIUM,
            "hard": self.DIFFICULTY_HARD,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "canvas_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "canvas_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
