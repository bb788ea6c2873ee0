"""
Lane Runner: a three-lane obstacle-dodging arcade game built on pygame.
"""

from .data_models import (
    Bounds, Command, Entity, GameSettings, GameState, JumpMode, Motion, Obstacle, Player
)
from .physics_core import LaneCore
from .game_engine import GameEngine

__version__ = "1.0.0"
