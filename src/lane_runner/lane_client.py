#!/usr/bin/env python3
"""
lane_client.py

Pygame frontend: window, input polling, frame pacing and rendering.
All game rules live in game_engine; this module only feeds it Commands
and elapsed time, then draws whatever state it holds.
"""

import random
from typing import Dict, Optional

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS, WINDOW_CAPTION,
    BACKGROUND_COLOR, GRASS_COLOR, GRASS_TILE_COLOR, GRASS_TILE,
    PLAYER_COLOR, OBSTACLE_COLOR, TEXT_COLOR, GAME_OVER_COLOR,
    SCORE_FONT_SIZE, GAME_OVER_FONT_SIZE, SCORE_POSITION
)
from .data_models import Command, Entity, GameSettings, GameState
from .game_engine import GameEngine

KEY_BINDINGS: Dict[int, Command] = {
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_SPACE: Command.RANDOM_JUMP,
    pygame.K_r: Command.RESTART,
}


def load_font(path: Optional[str], size: int) -> pygame.font.Font:
    """Loads a font. A missing font file ends the program."""
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as e:
        print(f"Could not load font '{path}': {e}")
        pygame.quit()
        raise SystemExit(1)


def load_texture(path: Optional[str]) -> Optional[pygame.Surface]:
    """Loads the background texture, or returns None if it is unavailable."""
    if path is None:
        return None
    try:
        return pygame.image.load(path).convert()
    except (OSError, pygame.error) as e:
        print(f"Could not load texture '{path}': {e}")
        return None


class LaneRunnerClient:
    def __init__(self, settings: Optional[GameSettings] = None, rng: Optional[random.Random] = None):
        pygame.init()
        self.settings = settings or GameSettings()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_CAPTION)

        # --- Assets (resolved once) ---
        self.font = load_font(self.settings.font_path, SCORE_FONT_SIZE)
        self.large_font = load_font(self.settings.font_path, GAME_OVER_FONT_SIZE)
        self.background = load_texture(self.settings.background_path)

        # --- Game Logic ---
        self.engine = GameEngine(self.settings, rng)

        # --- HUD cache ---
        self._score_label = None
        self._score_surface: Optional[pygame.Surface] = None

        # Time Management
        self.clock = pygame.time.Clock()
        self.running = True

    def run(self, max_frames: Optional[int] = None):
        """The main frame loop. Returns when the window is closed."""
        print(f"{WINDOW_CAPTION}: A/D or arrows to move, R to restart, Esc to quit.")
        frames = 0
        while self.running:
            self.process_events()
            elapsed = self.clock.tick(RENDER_FPS) / 1000.0
            self.engine.step(elapsed)
            self.draw()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                break

        pygame.quit()

    def process_events(self):
        """Drains the pygame event queue and forwards key presses to the engine."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    continue
                command = KEY_BINDINGS.get(event.key)
                if command is not None:
                    self.engine.handle_command(command)

    # ----------------- Rendering -----------------

    def draw(self):
        """Renders one frame."""
        if self.settings.background_path is not None and self.background is None:
            # Texture failed at startup: the frame is left as it was
            return

        screen = self.screen
        screen.fill(BACKGROUND_COLOR)
        self._draw_background()

        self._draw_entity(self.engine.player, PLAYER_COLOR)
        for obstacle in self.engine.obstacles:
            self._draw_entity(obstacle, OBSTACLE_COLOR)

        screen.blit(self._score_text(), SCORE_POSITION)

        if self.engine.state is GameState.GAME_OVER:
            message = self.large_font.render(self.engine.game_over_message, True, GAME_OVER_COLOR)
            rect = message.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2))
            screen.blit(message, rect)

        pygame.display.flip()

    def _draw_background(self):
        if self.background is not None:
            tile_w, tile_h = self.background.get_size()
            for x in range(0, SCREEN_WIDTH, tile_w):
                for y in range(0, SCREEN_HEIGHT, tile_h):
                    self.screen.blit(self.background, (x, y))
            return

        self.screen.fill(GRASS_COLOR)
        for x in range(0, SCREEN_WIDTH, GRASS_TILE):
            for y in range(0, SCREEN_HEIGHT, GRASS_TILE):
                if (x // GRASS_TILE + y // GRASS_TILE) % 2:
                    pygame.draw.rect(self.screen, GRASS_TILE_COLOR, (x, y, GRASS_TILE, GRASS_TILE))

    def _draw_entity(self, entity: Entity, color):
        box = entity.bounds()
        pygame.draw.rect(self.screen, color, (round(box.x), round(box.y), round(box.width), round(box.height)))

    def _score_text(self) -> pygame.Surface:
        # Re-rendered only when the label changes
        if self._score_label != self.engine.score_label:
            self._score_label = self.engine.score_label
            self._score_surface = self.font.render(self._score_label, True, TEXT_COLOR)
        return self._score_surface


def main():
    client = LaneRunnerClient(GameSettings.scored())
    client.run()


if __name__ == "__main__":
    main()
