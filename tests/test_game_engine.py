"""Tests for game_engine.py - frame stepping, scoring and the game-state machine."""
import random

import pytest

from conftest import SEED
from lane_runner.data_models import Command, GameSettings, GameState
from lane_runner.game_engine import GameEngine

LANE_XS = {170.0, 370.0, 570.0}


def force_collision(engine):
    """Parks the tracked obstacle on top of the player and evaluates one frame."""
    obstacle = engine.obstacles[0]
    obstacle.set_lane(engine.player.lane)
    obstacle.set_position(obstacle.x, 480)
    engine.step(0.0)


@pytest.mark.unit
class TestInitialState:

    def test_new_game(self, classic_engine):
        engine = classic_engine
        assert engine.state is GameState.PLAYING
        assert engine.score == 0
        assert engine.score_label == "Score: 0"
        assert engine.current_obstacle_index == 0
        assert engine.player.position == (370, 500)
        assert len(engine.obstacles) == 1
        assert engine.obstacles[0].position == (170, 300)

    def test_jump_threshold_within_interval(self, scored_engine):
        assert 1.0 <= scored_engine.next_jump_time <= 3.0
        assert scored_engine.time_since_last_jump == 0.0


@pytest.mark.unit
class TestProgress:
    """Passing obstacles, spawning and score."""

    def test_passing_obstacle_scores_and_spawns(self, classic_engine):
        engine = classic_engine
        engine.step(1.2)  # 300 + 175 * 1.2 = 510, below the player's 500

        assert engine.score == 1
        assert engine.score_label == "Score: 1"
        assert engine.current_obstacle_index == 1
        assert len(engine.obstacles) == 2
        spawned = engine.obstacles[-1]
        assert spawned.y == -50
        assert spawned.lane in (0, 1, 2)
        assert spawned.x in LANE_XS
        assert engine.state is GameState.PLAYING

    def test_no_score_before_passing(self, classic_engine):
        classic_engine.step(1.0)  # 475, still above the player
        assert classic_engine.score == 0
        assert len(classic_engine.obstacles) == 1

    def test_same_lane_scores_then_collides(self, classic_engine):
        engine = classic_engine
        engine.obstacles[0].set_lane(1)
        engine.step(1.2)

        assert engine.score == 1
        assert len(engine.obstacles) == 2
        assert engine.obstacles[1].y == -50
        assert engine.state is GameState.GAME_OVER

    def test_only_one_advance_per_frame(self, classic_engine):
        classic_engine.step(10.0)
        assert classic_engine.score == 1

    def test_passed_obstacles_are_pruned(self, classic_engine):
        engine = classic_engine
        engine.step(1.2)
        engine.step(1.0)  # first obstacle now at 685, past the bottom edge

        assert len(engine.obstacles) == 1
        assert engine.current_obstacle_index == 0
        assert engine.current_obstacle is engine.obstacles[0]
        assert engine.current_obstacle.y == pytest.approx(125.0)
        assert engine.score == 1

    def test_visible_passed_obstacles_are_kept(self, classic_engine):
        classic_engine.step(1.2)
        classic_engine.step(0.1)  # 527.5, still on screen
        assert len(classic_engine.obstacles) == 2


@pytest.mark.unit
class TestStateMachine:
    """Playing -> GameOver -> Playing."""

    def test_collision_ends_game(self, classic_engine):
        force_collision(classic_engine)
        assert classic_engine.state is GameState.GAME_OVER
        assert "Final score: 0" in classic_engine.game_over_message

    def test_game_over_freezes_world(self, classic_engine):
        engine = classic_engine
        force_collision(engine)
        player_before = engine.player.position
        obstacles_before = [o.position for o in engine.obstacles]

        engine.step(1.0)
        engine.handle_command(Command.MOVE_LEFT)
        engine.handle_command(Command.RANDOM_JUMP)

        assert engine.player.position == player_before
        assert [o.position for o in engine.obstacles] == obstacles_before
        assert engine.state is GameState.GAME_OVER

    def test_restart_resets_everything(self, classic_engine):
        engine = classic_engine
        engine.step(1.2)
        force_collision(engine)
        assert engine.score == 1

        engine.handle_command(Command.RESTART)

        assert engine.state is GameState.PLAYING
        assert engine.score == 0
        assert engine.score_label == "Score: 0"
        assert len(engine.obstacles) == 1
        assert engine.obstacles[0].position == (170, 300)
        assert engine.current_obstacle_index == 0
        assert engine.player.y == 500
        assert engine.player.x in LANE_XS
        assert engine.time_since_last_jump == 0.0

    def test_restart_ignored_while_playing(self, classic_engine):
        classic_engine.step(1.2)
        classic_engine.handle_command(Command.RESTART)
        assert classic_engine.score == 1
        assert len(classic_engine.obstacles) == 2


@pytest.mark.unit
class TestJumps:
    """Manual and timer-driven random lane jumps."""

    def test_lane_commands(self, classic_engine):
        classic_engine.handle_command(Command.MOVE_LEFT)
        assert classic_engine.player.lane == 0
        classic_engine.handle_command(Command.MOVE_LEFT)
        assert classic_engine.player.lane == 0
        classic_engine.handle_command(Command.MOVE_RIGHT)
        classic_engine.handle_command(Command.MOVE_RIGHT)
        classic_engine.handle_command(Command.MOVE_RIGHT)
        assert classic_engine.player.lane == 2

    def test_manual_jump_uses_engine_rng(self):
        replay = random.Random(SEED)
        replay.uniform(1.0, 3.0)
        expected = replay.randrange(3)

        engine = GameEngine(GameSettings.classic(), random.Random(SEED))
        engine.handle_command(Command.RANDOM_JUMP)
        assert engine.player.lane == expected

    def test_manual_jump_ignored_in_auto_mode(self, scored_engine):
        scored_engine.handle_command(Command.RANDOM_JUMP)
        assert scored_engine.player.lane == 1

    def test_timer_triggers_jump(self):
        replay = random.Random(SEED)
        replay.uniform(0.5, 0.5)
        expected = replay.randrange(3)

        engine = GameEngine(GameSettings.scored(jump_interval=(0.5, 0.5)), random.Random(SEED))
        engine.obstacles[0].set_position(170, -1000)

        engine.step(0.3)
        assert engine.player.lane == 1
        assert engine.time_since_last_jump == pytest.approx(0.3)

        engine.step(0.3)
        assert engine.player.lane == expected
        assert engine.time_since_last_jump == 0.0
        assert engine.next_jump_time == 0.5

    def test_no_timer_in_manual_mode(self, classic_engine):
        classic_engine.obstacles[0].set_position(170, -5000)
        for _ in range(5):
            classic_engine.step(0.5)
        assert classic_engine.time_since_last_jump == 0.0
        assert classic_engine.player.lane == 1

    def test_same_seed_same_game(self):
        def play(seed):
            engine = GameEngine(GameSettings.scored(), random.Random(seed))
            lanes = []
            for _ in range(20):
                engine.step(0.25)
                lanes.append((engine.player.lane, [o.lane for o in engine.obstacles]))
            return lanes, engine.score, engine.state

        assert play(5) == play(5)
