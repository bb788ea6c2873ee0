"""
game_engine.py: The authoritative game-state simulation.
"""

import random
from typing import List, Optional

from .constants import (
    PLAYER_START_X, PLAYER_START_Y, FIRST_OBSTACLE_Y, SPAWN_Y, LANE_COUNT
)
from .data_models import (
    Command, GameSettings, GameState, JumpMode, Obstacle, Player
)
from .physics_core import LaneCore


class GameEngine:
    """
    Owns the player, the obstacle list, score and the Playing/GameOver
    state. Rendering and input polling live in the client; this class only
    consumes Commands and elapsed time.
    """

    def __init__(self, settings: Optional[GameSettings] = None, rng: Optional[random.Random] = None):
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random()
        self.core = LaneCore(self.settings.fall_speed, self.settings.prune_margin)

        self.player = Player(x=PLAYER_START_X, y=PLAYER_START_Y)
        self.obstacles: List[Obstacle] = [self._first_obstacle()]
        self.current_obstacle_index = 0
        self.score = 0
        self.state = GameState.PLAYING
        self.score_label = ""
        self._refresh_score_label()

        self.time_since_last_jump = 0.0
        self.next_jump_time = self._draw_jump_time()

    # ----------------- Setup helpers -----------------

    def _first_obstacle(self) -> Obstacle:
        return Obstacle.in_lane(0, FIRST_OBSTACLE_Y)

    def _draw_jump_time(self) -> float:
        low, high = self.settings.jump_interval
        return self.rng.uniform(low, high)

    def _refresh_score_label(self):
        self.score_label = f"Score: {self.score}"

    @property
    def game_over_message(self) -> str:
        return f"Game Over! Final score: {self.score}  (press R to restart)"

    @property
    def current_obstacle(self) -> Optional[Obstacle]:
        if self.current_obstacle_index < len(self.obstacles):
            return self.obstacles[self.current_obstacle_index]
        return None

    # ----------------- Input -----------------

    def handle_command(self, command: Command):
        """Applies one logical input. Only RESTART is honoured after a game over."""
        if self.state is GameState.GAME_OVER:
            if command is Command.RESTART:
                self.restart()
            return

        if command is Command.MOVE_LEFT:
            self.player.move_left()
        elif command is Command.MOVE_RIGHT:
            self.player.move_right()
        elif command is Command.RANDOM_JUMP and self.settings.jump_mode is JumpMode.MANUAL:
            self.player.random_move(self.rng)

    # ----------------- Simulation -----------------

    def spawn_obstacle(self) -> Obstacle:
        """Appends a new obstacle in a random lane just above the window."""
        obstacle = Obstacle.in_lane(self.rng.randrange(LANE_COUNT), SPAWN_Y)
        self.obstacles.append(obstacle)
        return obstacle

    def step(self, dt: float):
        """
        One frame of simulation. Does nothing once the game is over.
        """
        if self.state is not GameState.PLAYING:
            return

        # 1. Move everything
        self.core.advance(self.player, dt)
        for obstacle in self.obstacles:
            self.core.advance(obstacle, dt)

        # 2. Timer-driven random jump
        if self.settings.jump_mode is JumpMode.AUTO:
            self.time_since_last_jump += dt
            if self.time_since_last_jump > self.next_jump_time:
                self.player.random_move(self.rng)
                self.time_since_last_jump = 0.0
                self.next_jump_time = self._draw_jump_time()

        # 3. Progress: at most one obstacle is counted per frame
        current = self.current_obstacle
        if current is not None and self.player.y < current.y:
            self.spawn_obstacle()
            self.current_obstacle_index += 1
            self.score += 1
            self._refresh_score_label()

        # 4. Drop passed obstacles that have left the window
        self._prune_obstacles()

        # 5. Collision
        if self.core.check_collision(self.player, self.obstacles):
            self.state = GameState.GAME_OVER
            print(f"Game over. Final score: {self.score}")

    def _prune_obstacles(self):
        removed = 0
        while (removed < self.current_obstacle_index
               and self.core.is_off_screen(self.obstacles[removed])):
            removed += 1
        if removed:
            del self.obstacles[:removed]
            self.current_obstacle_index -= removed

    def restart(self):
        """Resets score, obstacles, player and jump timer and resumes play."""
        self.score = 0
        self._refresh_score_label()
        self.obstacles.clear()
        self.obstacles.append(self._first_obstacle())
        self.current_obstacle_index = 0

        self.player = Player(x=PLAYER_START_X, y=PLAYER_START_Y)
        self.player.random_move(self.rng)

        self.time_since_last_jump = 0.0
        self.next_jump_time = self._draw_jump_time()
        self.state = GameState.PLAYING
        print("Restarted.")
