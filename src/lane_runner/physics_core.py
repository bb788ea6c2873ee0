"""
physics_core.py: The shared, deterministic motion rules and collision logic.
"""

from typing import Callable, Dict, Iterable

from .constants import SCREEN_HEIGHT
from .data_models import Entity, Motion


class LaneCore:
    """
    Motion and collision rules used by the game engine.
    Each Motion tag maps to one policy; there are no per-class update methods.
    """

    SCREEN_HEIGHT = SCREEN_HEIGHT

    def __init__(self, fall_speed: float, prune_margin: float = 0.0):
        self.fall_speed = fall_speed
        self.prune_margin = prune_margin
        self._policies: Dict[Motion, Callable[[Entity, float], None]] = {
            Motion.DRIFT: self._drift,
            Motion.FALL: self._fall,
            Motion.LANE_LOCKED: self._hold,
        }

    def advance(self, entity: Entity, dt: float):
        """Moves an entity forward by dt seconds according to its motion tag."""
        self._policies[entity.motion](entity, dt)

    def _drift(self, entity: Entity, dt: float):
        entity.move(entity.x_speed * dt, entity.y_speed * dt)

    def _fall(self, entity: Entity, dt: float):
        entity.move(0.0, self.fall_speed * dt)

    def _hold(self, entity: Entity, dt: float):
        # Lane-locked entities only move through explicit lane changes
        pass

    def check_collision(self, player: Entity, obstacles: Iterable[Entity]) -> bool:
        """Checks the player's box against every obstacle."""
        player_bounds = player.bounds()
        for obstacle in obstacles:
            if player_bounds.intersects(obstacle.bounds()):
                return True
        return False

    def is_off_screen(self, entity: Entity) -> bool:
        """True once the entity's top edge has left the bottom of the window."""
        return entity.y > self.SCREEN_HEIGHT + self.prune_margin
