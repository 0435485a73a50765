import random
import tracemalloc

import pytest

from clothsim.Particle import Particle
from clothsim.Vec3 import Vec3
from clothsim.collision import _candidate_pairs, apply_corrections, find_collisions, resolve_collisions
from clothsim.world import create_cloth

EPSILON = 0.3


def test_close_pair_pushed_apart_symmetrically():
    a, b = Particle((0.0, 0.0, 0.0)), Particle((0.1, 0.0, 0.0))
    mid_before = (a.pos + b.pos) * 0.5
    assert resolve_collisions([a, b], EPSILON) == 2
    assert (b.pos - a.pos).length() >= EPSILON - 1e-12
    mid_after = (a.pos + b.pos) * 0.5
    assert mid_after.x == pytest.approx(mid_before.x)
    assert mid_after.y == pytest.approx(mid_before.y)
    assert mid_after.z == pytest.approx(mid_before.z)


def test_corrections_are_equal_and_opposite():
    a, b = Particle((0.0, 0.0, 0.0)), Particle((0.0, 0.0, 0.2))
    mods = find_collisions([a, b], EPSILON)
    assert [i for i, _ in mods] == [0, 1]
    (_, d0), (_, d1) = mods
    assert d0 == -d1
    # index 0 is pushed away from index 1
    assert d0.z == pytest.approx(-0.1)


def test_far_pairs_untouched():
    ps = [Particle((0, 0, 0)), Particle((1, 0, 0)), Particle((0, 1, 0))]
    assert find_collisions(ps, EPSILON) == []


def test_coincident_particles_skipped():
    ps = [Particle((1, 1, 1)), Particle((1, 1, 1))]
    assert find_collisions(ps, EPSILON) == []


def test_detection_uses_positions_from_before_the_pass():
    ps = [Particle((0.0, 0, 0)), Particle((0.2, 0, 0)), Particle((0.4, 0, 0))]
    mods = find_collisions(ps, EPSILON)
    pairs = [(mods[k][0], mods[k + 1][0]) for k in range(0, len(mods), 2)]
    assert pairs == [(0, 1), (1, 2)]
    # the 0-2 pair is 0.4 apart and never counted
    assert all(p.pos.x in (0.0, 0.2, 0.4) for p in ps)

    apply_corrections(ps, mods)
    # middle particle receives equal pushes from both sides
    assert ps[1].pos.x == pytest.approx(0.2)
    assert ps[0].pos.x == pytest.approx(-0.1)
    assert ps[2].pos.x == pytest.approx(0.5)


def test_pinned_partner_does_not_move():
    a = Particle((0, 0, 0), fixed=True)
    b = Particle((0.1, 0, 0))
    resolve_collisions([a, b], EPSILON)
    assert a.pos == Vec3(0, 0, 0)
    assert b.pos.x == pytest.approx(EPSILON)


def test_zero_threshold_disables_pass():
    ps = [Particle((0, 0, 0)), Particle((0.01, 0, 0))]
    assert find_collisions(ps, 0.0) == []
    assert find_collisions([ps[0]], EPSILON) == []


def scattered_particles(n, seed=5, size=2.0):
    rng = random.Random(seed)
    return [Particle((rng.uniform(0, size), rng.uniform(0, size), rng.uniform(0, size)))
            for _ in range(n)]


def test_blocked_broad_phase_matches_brute_force():
    ps = scattered_particles(300)
    exact = [(i, j) for i in range(len(ps)) for j in range(i + 1, len(ps))
             if (ps[j].pos - ps[i].pos).length() < EPSILON]
    assert exact

    # small blocks so pairs straddle many block boundaries
    candidates = _candidate_pairs(ps, EPSILON, row_block=7)
    assert candidates == sorted(candidates)
    assert set(exact) <= set(candidates)

    mods = find_collisions(ps, EPSILON)
    assert [(mods[k][0], mods[k + 1][0]) for k in range(0, len(mods), 2)] == exact


def test_broad_phase_memory_stays_bounded_on_large_cloth():
    world, _ = create_cloth(subdivisions=60, seed=0)
    particles = world.particles.data

    tracemalloc.start()
    try:
        pairs = _candidate_pairs(particles, EPSILON)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    assert pairs
    # a dense 3600 x 3600 x 3 difference array alone would be ~311 MB
    assert peak < 32 * 1024 * 1024
    close = [(i, j) for i, j in pairs if (particles[j].pos - particles[i].pos).length() < EPSILON]
    assert close
    assert resolve_collisions(particles, EPSILON) == 2 * len(close)
