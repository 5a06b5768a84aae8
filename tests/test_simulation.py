import random

import pytest

from glyphtrail.config import Config
from glyphtrail.particles import FRAME_MS
from glyphtrail.simulation import TrailSimulation, clamp_frame_delta
from tests.helpers import make_particle


def test_first_sample_spawns_nothing_but_drifts_hue():
    sim = TrailSimulation(rng=random.Random(0))
    assert sim.hue == 210.0

    assert sim.on_move(0.0, 0.0) == 0

    assert len(sim.particles) == 0
    assert sim.hue == pytest.approx(210.35)
    assert sim.spawn_carry == 0.0


def test_horizontal_swipe_end_to_end():
    sim = TrailSimulation(rng=random.Random(0))
    sim.on_move(0.0, 0.0)
    hue_before = sim.hue

    spawned = sim.on_move(100.0, 0.0)

    sample = sim.tracker.sample
    assert (sample.vx, sample.vy, sample.speed) == (100.0, 0.0, 100.0)
    assert sim.hue == pytest.approx((hue_before + 1.35) % 360)
    assert spawned == 16
    assert len(sim.particles) == 16
    assert sim.spawn_carry == pytest.approx(100 / 6 - 16)

    # Evenly spaced from the previous position to the current one
    assert sim.particles[0].x == pytest.approx(0.0)
    assert sim.particles[-1].x == pytest.approx(100.0)
    assert sim.particles[1].x == pytest.approx(100 / 15)


def test_hue_wraps_around():
    sim = TrailSimulation(Config(start_hue=359.9))
    sim.on_move(0.0, 0.0)
    assert 0.0 <= sim.hue < 1.0


def test_population_capped_under_heavy_motion():
    sim = TrailSimulation(rng=random.Random(2))
    sim.on_move(0.0, 0.0)
    for i in range(1, 200):
        sim.on_move(float(i * 300 % 2000), float(i * 170 % 1500))
        assert len(sim.particles) <= 1200
    assert len(sim.particles) == 1200


def test_step_clamps_large_frame_delta():
    sim = TrailSimulation()
    p = make_particle(vx=1.0, life=10.0)
    sim.particles.append(p)

    drawn = sim.step(1000.0)

    assert drawn == [p]
    assert p.life == pytest.approx(10.0 - 32.0 / FRAME_MS)


def test_clamp_frame_delta():
    assert clamp_frame_delta(16.0) == 16.0
    assert clamp_frame_delta(250.0) == 32.0
    assert clamp_frame_delta(-5.0) == 0.0


def test_simulations_are_independent():
    a = TrailSimulation(rng=random.Random(0))
    b = TrailSimulation(rng=random.Random(0))
    a.on_move(0.0, 0.0)
    a.on_move(60.0, 0.0)
    assert len(a.particles) == 10
    assert len(b.particles) == 0
    assert b.hue == 210.0


def test_reset_forgets_previous_position():
    sim = TrailSimulation()
    sim.on_move(0.0, 0.0)
    sim.on_move(60.0, 0.0)
    sim.reset()
    assert len(sim.particles) == 0
    assert sim.on_move(500.0, 500.0) == 0


def test_particles_fade_out_over_time():
    sim = TrailSimulation(rng=random.Random(4))
    sim.on_move(0.0, 0.0)
    sim.on_move(120.0, 0.0)
    assert len(sim.particles) == 20

    # Longest possible life is 60 frames
    for _ in range(61):
        sim.step(FRAME_MS)
    assert len(sim.particles) == 0


def test_store_capacity_follows_config():
    sim = TrailSimulation(Config(max_particles=50))
    assert sim.particles.capacity == 50
