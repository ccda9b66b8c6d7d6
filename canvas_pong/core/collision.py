"""
Collision detection system for Canvas Pong
"""

import logging

from canvas_pong.core.entities import Box
from canvas_pong.core.entities import Entity
from canvas_pong.core.interfaces.handlers import CollisionListener

logger = logging.getLogger(__name__)


def boxes_overlap(a: Box, b: Box) -> bool:
    """
    Checks if two boxes overlap, edges included.

    Intervals are closed on both axes, so boxes sharing a single edge or
    corner are considered colliding.
    """
    if a.x <= b.x:
        hit_x = a.x + a.width >= b.x
    else:
        hit_x = b.x + b.width >= a.x

    if a.y <= b.y:
        hit_y = a.y + a.height >= b.y
    else:
        hit_y = b.y + b.height >= a.y

    return hit_x and hit_y


class CollisionDetector:
    """
    Pairwise overlap checks over the watched entities of one match.

    Every check is O(n²) in the number of watched entities.
    """

    def __init__(self) -> None:
        self.watched: list[Entity] = []
        self.listeners: list[CollisionListener] = []

    def watch(self, *entities: Entity) -> None:
        """Adds entities to the overlap checks, in registration order"""
        known_ids = {entity.id for entity in self.watched}
        for entity in entities:
            if entity.id in known_ids:
                raise ValueError(f"Entity {entity.id!r} is already watched")
            known_ids.add(entity.id)
            self.watched.append(entity)

        logger.debug("Watching %d entities", len(self.watched))

    def add_listener(self, listener: CollisionListener) -> None:
        self.listeners.append(listener)

    def find_overlaps(self, entity: Entity) -> list[Entity]:
        """Returns the other watched entities overlapping `entity`, in registration order"""
        return [
            other
            for other in self.watched
            if other is not entity and boxes_overlap(entity.box, other.box)
        ]

    def check_all(self) -> None:
        """Runs the collision handlers of every watched entity that overlaps another"""
        for entity in self.watched:
            overlaps = self.find_overlaps(entity)
            if not overlaps:
                continue

            entity.collide(overlaps)
            for listener in self.listeners:
                listener.on_entity_collision(entity, overlaps)

    def on_tick(self) -> None:
        """Tick observer entry point"""
        self.check_all()
