import random

import pytest

pytest.importorskip("pygame")

from clothsim import app, constants  # noqa: E402
from clothsim.world import create_cloth  # noqa: E402


def settings():
    return {'gravity': 0.2, 'wind': 0.1, 'paused': False, 'reset': False}


def test_config_from_args():
    args = app.parse_args(["--subdivisions", "12", "--iterations", "4", "--no-collisions", "--seed", "7"])
    config = app.config_from_args(args)
    assert config.subdivisions == 12
    assert config.constraint_iterations == 4
    assert config.collisions is False
    assert args.seed == 7


def test_host_forces_gravity_and_bounded_wind():
    rng = random.Random(1)
    for _ in range(20):
        gravity, wind = app.host_forces(settings(), rng)
        assert gravity == (0.0, -0.2, 0.0)
        assert wind[:2] == (0.0, 0.0)
        assert -0.1 <= wind[2] <= 0.1


def test_shared_controls_update_session():
    world, _ = create_cloth(subdivisions=4, seed=0)
    s = settings()
    shared = {'gravity': 0.5, 'wind': 0.0, 'toggle_pause': True, 'reset_world': True,
              'constraint_iterations': 3, '__exit__': False}

    assert app.apply_shared_controls(shared, world, s) is True
    assert s['gravity'] == 0.5
    assert s['wind'] == 0.0
    assert s['paused'] is True
    assert s['reset'] is True
    assert shared['toggle_pause'] is False
    assert shared['reset_world'] is False
    assert world.config.constraint_iterations == 3
    assert shared['pinned'] == 8
    assert shared['tick'] == 0


def test_shared_controls_report_exit():
    world, _ = create_cloth(subdivisions=4, seed=0)
    assert app.apply_shared_controls({'__exit__': True}, world, settings()) is False


def test_constraint_error_refreshed_every_status_interval():
    world, _ = create_cloth(subdivisions=4, seed=0)
    s = settings()
    shared = {'__exit__': False}

    app.apply_shared_controls(shared, world, s)
    assert shared['constraint_error'] == 0.0
    assert s['error_tick'] == 0

    shared['constraint_error'] = -1.0
    for _ in range(constants.STATUS_EVERY - 1):
        world.step()
    app.apply_shared_controls(shared, world, s)
    assert shared['constraint_error'] == -1.0

    world.step()
    app.apply_shared_controls(shared, world, s)
    assert shared['constraint_error'] >= 0.0
    assert s['error_tick'] == constants.STATUS_EVERY


def test_constraint_error_refreshed_after_reset():
    world, _ = create_cloth(subdivisions=4, seed=0)
    s = dict(settings(), error_tick=50)
    shared = {'__exit__': False}
    app.apply_shared_controls(shared, world, s)
    assert 'constraint_error' in shared
    assert s['error_tick'] == 0
