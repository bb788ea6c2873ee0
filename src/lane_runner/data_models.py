"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import (
    ENTITY_SIZE, LANE_COUNT, LANE_WIDTH, LANE_MARGIN, START_LANE,
    CLASSIC_FALL_SPEED, SCORED_FALL_SPEED,
    JUMP_INTERVAL_MIN, JUMP_INTERVAL_MAX, PRUNE_MARGIN
)


def lane_x(lane: int, lane_width: float = LANE_WIDTH, lane_margin: float = LANE_MARGIN) -> float:
    """Returns the fixed x-coordinate of a lane."""
    return lane * lane_width + lane_margin


def _check_lane(lane: int):
    if not 0 <= lane < LANE_COUNT:
        raise ValueError(f"lane must be in [0, {LANE_COUNT - 1}], got {lane}")


class Motion(Enum):
    """Motion policy tag, dispatched by LaneCore.advance."""
    DRIFT = "drift"               # Moves by its configured velocity
    FALL = "fall"                 # Fixed downward speed, velocity ignored
    LANE_LOCKED = "lane_locked"   # Position only changes through lane moves


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class JumpMode(Enum):
    MANUAL = "manual"   # Space triggers a random jump
    AUTO = "auto"       # A randomized timer triggers the jump


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    RANDOM_JUMP = "random_jump"
    RESTART = "restart"


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box used for collision tests."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Bounds") -> bool:
        """True when both the x-intervals and y-intervals overlap. Touching edges do not count."""
        return (max(self.x, other.x) < min(self.right, other.right)
                and max(self.y, other.y) < min(self.bottom, other.bottom))


@dataclass
class Entity:
    """A positioned, fixed-size box with an optional constant velocity."""
    x: float
    y: float
    x_speed: int = 0
    y_speed: int = 0
    motion: Motion = Motion.DRIFT
    size: float = ENTITY_SIZE

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def set_position(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def set_speed(self, x_speed: int, y_speed: int):
        self.x_speed = int(x_speed)
        self.y_speed = int(y_speed)

    def move(self, dx: float, dy: float):
        self.x += dx
        self.y += dy

    def bounds(self) -> Bounds:
        return Bounds(self.x, self.y, self.size, self.size)


@dataclass
class Player(Entity):
    """
    The player's box. Confined to one of three lanes; x is always derived
    from the lane and never drifts.
    """
    motion: Motion = Motion.LANE_LOCKED
    lane: int = START_LANE
    lane_width: float = LANE_WIDTH
    lane_margin: float = LANE_MARGIN

    def __post_init__(self):
        _check_lane(self.lane)
        self.update_position()

    def move_left(self):
        if self.lane > 0:
            self.lane -= 1
            self.update_position()

    def move_right(self):
        if self.lane < LANE_COUNT - 1:
            self.lane += 1
            self.update_position()

    def random_move(self, rng: random.Random):
        """Jumps to a uniformly random lane. May land on the current one."""
        self.lane = rng.randrange(LANE_COUNT)
        self.update_position()

    def update_position(self):
        self.x = lane_x(self.lane, self.lane_width, self.lane_margin)


@dataclass
class Obstacle(Entity):
    """A falling box. Its lane is informational until set_lane snaps it."""
    motion: Motion = Motion.FALL
    lane: int = 0

    @classmethod
    def in_lane(cls, lane: int, y: float) -> "Obstacle":
        obstacle = cls(x=lane_x(lane), y=y)
        obstacle.set_lane(lane)
        return obstacle

    def set_lane(self, lane: int):
        _check_lane(lane)
        self.lane = lane
        self.x = lane_x(lane)


@dataclass
class GameSettings:
    """Startup configuration. Asset paths are resolved once by the client."""
    fall_speed: float = SCORED_FALL_SPEED
    jump_mode: JumpMode = JumpMode.AUTO
    jump_interval: Tuple[float, float] = (JUMP_INTERVAL_MIN, JUMP_INTERVAL_MAX)
    font_path: Optional[str] = None         # None -> pygame default font
    background_path: Optional[str] = None   # None -> plain tiled fill
    prune_margin: float = PRUNE_MARGIN

    def __post_init__(self):
        if self.fall_speed <= 0:
            raise ValueError(f"fall_speed must be positive, got {self.fall_speed}")
        low, high = self.jump_interval
        if low < 0 or high < low:
            raise ValueError(f"invalid jump_interval {self.jump_interval}")

    @classmethod
    def classic(cls, **overrides) -> "GameSettings":
        """Slower obstacles, random jump on the space key."""
        overrides.setdefault("fall_speed", CLASSIC_FALL_SPEED)
        overrides.setdefault("jump_mode", JumpMode.MANUAL)
        return cls(**overrides)

    @classmethod
    def scored(cls, **overrides) -> "GameSettings":
        """Faster obstacles, timer-driven random jumps."""
        overrides.setdefault("fall_speed", SCORED_FALL_SPEED)
        overrides.setdefault("jump_mode", JumpMode.AUTO)
        return cls(**overrides)
