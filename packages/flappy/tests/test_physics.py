"""Tests for the pure physics, spawning and collision functions."""
from __future__ import annotations

import math
import random

from flappy.config import GameConfig
from flappy.physics import (
    advance_pipes,
    collect_passed,
    collides,
    cull_pipes,
    generate_pipe,
    hits_bounds,
    hits_pipe,
    integrate_bird,
    needs_pipe,
)
from flappy.types import Bird, Pipe

CONFIG = GameConfig()


class FixedRandom(random.Random):
    """Random source that always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


# ── integrate_bird ────────────────────────────────────────────────


class TestIntegrateBird:
    def test_first_tick_from_rest(self) -> None:
        bird = integrate_bird(Bird(x=100, y=300, velocity=0), 0.5)
        assert bird.velocity == 0.5
        assert bird.y == 300.5

    def test_position_uses_previous_velocity_plus_gravity(self) -> None:
        bird = integrate_bird(Bird(x=100, y=300.5, velocity=0.5), 0.5)
        assert bird.velocity == 1.0
        assert bird.y == 301.5

    def test_after_impulse(self) -> None:
        bird = integrate_bird(Bird(x=100, y=300, velocity=-8), 0.5)
        assert bird.velocity == -7.5
        assert bird.y == 292.5

    def test_x_is_unchanged(self) -> None:
        bird = integrate_bird(Bird(x=100, y=300, velocity=3), 0.5)
        assert bird.x == 100

    def test_input_not_mutated(self) -> None:
        original = Bird(x=100, y=300, velocity=0)
        integrate_bird(original, 0.5)
        assert original == Bird(x=100, y=300, velocity=0)


# ── pipes ─────────────────────────────────────────────────────────


class TestPipeMovement:
    def test_advance_moves_left(self) -> None:
        pipes = [Pipe.spawn(400, 100, 150), Pipe.spawn(200, 80, 150)]
        moved = advance_pipes(pipes, 2)
        assert [p.x for p in moved] == [398, 198]

    def test_advance_keeps_gap(self) -> None:
        moved = advance_pipes([Pipe.spawn(400, 123.4, 150)], 2)
        assert math.isclose(moved[0].bottom_y - moved[0].top_height, 150)

    def test_cull_removes_fully_offscreen(self) -> None:
        pipes = [Pipe.spawn(-60, 100, 150), Pipe.spawn(-59, 100, 150)]
        kept = cull_pipes(pipes, 60)
        assert [p.x for p in kept] == [-59]

    def test_cull_keeps_order(self) -> None:
        pipes = [Pipe.spawn(x, 100, 150) for x in (-70, 10, 210, 400)]
        assert [p.x for p in cull_pipes(pipes, 60)] == [10, 210, 400]


class TestNeedsPipe:
    def test_empty_needs_pipe(self) -> None:
        assert needs_pipe([], CONFIG)

    def test_rightmost_at_threshold_does_not_spawn(self) -> None:
        assert not needs_pipe([Pipe.spawn(200, 100, 150)], CONFIG)

    def test_rightmost_past_threshold_spawns(self) -> None:
        assert needs_pipe([Pipe.spawn(199, 100, 150)], CONFIG)

    def test_only_rightmost_pipe_matters(self) -> None:
        pipes = [Pipe.spawn(10, 100, 150), Pipe.spawn(300, 100, 150)]
        assert not needs_pipe(pipes, CONFIG)


class TestGeneratePipe:
    def test_spawns_at_right_edge(self) -> None:
        pipe = generate_pipe(CONFIG, FixedRandom(0.5))
        assert pipe.x == 400
        assert pipe.passed is False

    def test_lowest_random_value(self) -> None:
        pipe = generate_pipe(CONFIG, FixedRandom(0.0))
        assert pipe.top_height == 50
        assert pipe.bottom_y == 200

    def test_highest_random_value(self) -> None:
        pipe = generate_pipe(CONFIG, FixedRandom(1.0))
        assert pipe.top_height == 400
        assert pipe.bottom_y == 550

    def test_seeded_source_is_reproducible(self) -> None:
        a = generate_pipe(CONFIG, random.Random(42))
        b = generate_pipe(CONFIG, random.Random(42))
        assert a == b

    def test_matches_formula(self) -> None:
        expected = random.Random(9).random() * (600 - 150 - 100) + 50
        pipe = generate_pipe(CONFIG, random.Random(9))
        assert math.isclose(pipe.top_height, expected)
        assert math.isclose(pipe.bottom_y - pipe.top_height, 150)

    def test_always_within_margins(self) -> None:
        rng = random.Random(3)
        for _ in range(500):
            pipe = generate_pipe(CONFIG, rng)
            assert 50 <= pipe.top_height < 400
            assert pipe.bottom_y <= 600 - 50


# ── scoring ───────────────────────────────────────────────────────


class TestCollectPassed:
    def test_right_edge_behind_bird_scores(self) -> None:
        pipes, gained = collect_passed([Pipe.spawn(39, 100, 150)], 100, 60)
        assert gained == 1
        assert pipes[0].passed

    def test_right_edge_level_with_bird_does_not_score(self) -> None:
        pipes, gained = collect_passed([Pipe.spawn(40, 100, 150)], 100, 60)
        assert gained == 0
        assert not pipes[0].passed

    def test_already_passed_not_counted_again(self) -> None:
        pipe = Pipe(x=0, top_height=100, bottom_y=250, passed=True)
        pipes, gained = collect_passed([pipe], 100, 60)
        assert gained == 0
        assert pipes == [pipe]

    def test_counts_each_new_pipe(self) -> None:
        pipes = [Pipe.spawn(-50, 100, 150), Pipe.spawn(20, 100, 150), Pipe.spawn(300, 100, 150)]
        result, gained = collect_passed(pipes, 100, 60)
        assert gained == 2
        assert [p.passed for p in result] == [True, True, False]


# ── collision ─────────────────────────────────────────────────────


class TestBounds:
    def test_above_ceiling(self) -> None:
        assert hits_bounds(Bird(x=100, y=-1), CONFIG)

    def test_touching_ceiling(self) -> None:
        assert hits_bounds(Bird(x=100, y=0), CONFIG)

    def test_touching_ground(self) -> None:
        assert hits_bounds(Bird(x=100, y=580), CONFIG)

    def test_just_above_ground(self) -> None:
        assert not hits_bounds(Bird(x=100, y=579.9), CONFIG)

    def test_mid_air(self) -> None:
        assert not hits_bounds(Bird(x=100, y=300), CONFIG)


class TestHitsPipe:
    def test_inside_gap_while_overlapping(self) -> None:
        pipe = Pipe.spawn(90, 200, 150)
        assert not hits_pipe(Bird(x=100, y=250), pipe, CONFIG)

    def test_gap_edges_are_inclusive(self) -> None:
        pipe = Pipe.spawn(90, 200, 150)
        assert not hits_pipe(Bird(x=100, y=200), pipe, CONFIG)
        assert not hits_pipe(Bird(x=100, y=330), pipe, CONFIG)

    def test_above_gap(self) -> None:
        pipe = Pipe.spawn(90, 200, 150)
        assert hits_pipe(Bird(x=100, y=199), pipe, CONFIG)

    def test_below_gap(self) -> None:
        pipe = Pipe.spawn(90, 200, 150)
        assert hits_pipe(Bird(x=100, y=331), pipe, CONFIG)

    def test_pipe_left_edge_touching_bird_is_clear(self) -> None:
        pipe = Pipe.spawn(120, 400, 150)
        assert not hits_pipe(Bird(x=100, y=100), pipe, CONFIG)

    def test_pipe_right_edge_touching_bird_is_clear(self) -> None:
        pipe = Pipe.spawn(40, 400, 150)
        assert not hits_pipe(Bird(x=100, y=100), pipe, CONFIG)

    def test_one_pixel_overlap_hits(self) -> None:
        pipe = Pipe.spawn(119, 400, 150)
        assert hits_pipe(Bird(x=100, y=100), pipe, CONFIG)


class TestCollides:
    def test_ceiling_regardless_of_pipes(self) -> None:
        assert collides(Bird(x=100, y=-1), [], CONFIG)
        assert collides(Bird(x=100, y=-1), [Pipe.spawn(90, -50, 1000)], CONFIG)

    def test_no_pipes_mid_air(self) -> None:
        assert not collides(Bird(x=100, y=300), [], CONFIG)

    def test_any_pipe_hit(self) -> None:
        pipes = [Pipe.spawn(300, 100, 150), Pipe.spawn(90, 350, 150)]
        assert collides(Bird(x=100, y=300), pipes, CONFIG)

    def test_clear_of_all_pipes(self) -> None:
        pipes = [Pipe.spawn(300, 100, 150), Pipe.spawn(90, 250, 150)]
        assert not collides(Bird(x=100, y=300), pipes, CONFIG)
