"""
Handler protocols - the observer seams between entities, the loop and the match
"""

from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from canvas_pong.core.entities import Entity
    from canvas_pong.core.entities import Side
    from canvas_pong.core.match import Score


class UpdateHandler(Protocol):
    """Runs once per tick for the entity it is attached to"""

    def on_update(self) -> None: ...


class CollisionHandler(Protocol):
    """Receives every watched entity overlapping its entity this tick"""

    def on_collision(self, others: list["Entity"]) -> None: ...


class TickObserver(Protocol):
    """Runs once per tick, before any entity is updated"""

    def on_tick(self) -> None: ...


class CollisionListener(Protocol):
    """
    Receives every non-empty overlap set found by a collision pass.

    Unlike CollisionHandler it is attached to the detector and sees all
    entities, which makes it suitable for scoreboards, sound effects, etc.
    """

    def on_entity_collision(self, entity: "Entity", others: list["Entity"]) -> None: ...


class GoalHandler(Protocol):
    """Notified when the ball crosses a goal line"""

    def on_goal(self, scorer: "Side") -> None:
        """
        Args:
            scorer: Side of the player who won the point
        """
        ...


class ScoreHandler(Protocol):
    """Notified whenever the score changes or is reset"""

    def on_score(self, score: "Score") -> None: ...
