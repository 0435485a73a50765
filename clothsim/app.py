"""
Interactive pygame host for the cloth world.

Left mouse button pins the patch under the pointer, right button releases
it. Space pauses, R resets the cloth.
"""

import argparse
import logging
import random
from multiprocessing import Manager, Process

import pygame

from clothsim import constants
from clothsim.DistanceConstraint import STRUCTURAL
from clothsim.config import SimConfig
from clothsim.view import Projection
from clothsim.world import create_cloth

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Mass-spring cloth simulation")
    add = parser.add_argument
    add('--subdivisions', type=int,   default=constants.SUBDIVISIONS)
    add('--width',        type=float, default=constants.CLOTH_WIDTH)
    add('--height',       type=float, default=constants.CLOTH_HEIGHT)
    add('--dt',           type=float, default=constants.DT)
    add('--damping',      type=float, default=constants.DAMPING)
    add('--iterations',   type=int,   default=constants.CONSTRAINTS_ITER)
    add('--epsilon',      type=float, default=constants.EPSILON)
    add('--seed',         type=int,   default=None)
    add('--no-collisions', action='store_true')
    add('--no-gui',       action='store_true', help="do not open the control panel")
    add('--log-level',    default='INFO')
    return parser.parse_args(argv)


def config_from_args(args):
    return SimConfig(
        dt=args.dt,
        damping=args.damping,
        constraint_iterations=args.iterations,
        collision_epsilon=args.epsilon,
        subdivisions=args.subdivisions,
        width=args.width,
        height=args.height,
        collisions=not args.no_collisions,
    )


def host_forces(settings, rng):
    """Gravity plus a random crosswind along z for one frame."""
    wind = settings['wind']
    return [
        (0.0, -settings['gravity'], 0.0),
        (0.0, 0.0, rng.uniform(-wind, wind)),
    ]


def apply_shared_controls(shared, world, settings):
    """
    Pull control panel edits into the running session and publish status
    back. Returns False once the panel asked to exit.
    """
    settings['gravity'] = float(shared.get('gravity', settings['gravity']))
    settings['wind'] = float(shared.get('wind', settings['wind']))
    if shared.get('toggle_pause', False):
        settings['paused'] = not settings['paused']
        shared['toggle_pause'] = False
    if shared.get('reset_world', False):
        settings['reset'] = True
        shared['reset_world'] = False

    iterations = shared.get('constraint_iterations')
    if iterations is not None and int(iterations) != world.config.constraint_iterations:
        world.config = world.config.replace(constraint_iterations=int(iterations))
        logger.info(f"Constraint iterations set to {world.config.constraint_iterations}")

    shared['tick'] = world.tick
    shared['pinned'] = len(world.pinned_indices())
    # constraint error refreshed every STATUS_EVERY ticks, and after a reset
    last = settings.get('error_tick')
    if last is None or world.tick < last or world.tick - last >= constants.STATUS_EVERY:
        shared['constraint_error'] = world.constraint_error()
        settings['error_tick'] = world.tick
    return not shared.get('__exit__', False)


def _structural_pairs(world):
    grid = world.particles
    return [(grid.index_of(*c.a), grid.index_of(*c.b))
            for c in world.constraints if c.kind == STRUCTURAL]


def _new_session(config, seed):
    world, _ = create_cloth(config=config, seed=seed)
    projection = Projection.fit(world.positions_array(), (constants.WIDTH, constants.HEIGHT), margin=0.15)
    return world, projection, _structural_pairs(world)


def draw(screen, world, projection, links):
    screen_pos = projection.project(world.positions_array())
    for i, j in links:
        pygame.draw.line(screen, constants.LINK_COLOR, tuple(screen_pos[i]), tuple(screen_pos[j]), 1)
    for p, (sx, sy) in zip(world.particles, screen_pos):
        color = constants.GREY if p.fixed else constants.RED
        pygame.draw.circle(screen, color, (int(sx), int(sy)), 3 if p.fixed else 2)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = config_from_args(args)

    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
    pygame.display.set_caption("Cloth")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 28)
    rng = random.Random(args.seed)

    world, projection, links = _new_session(config, args.seed)
    settings = {
        'gravity': -constants.GRAVITY[1],
        'wind': constants.WIND_STRENGTH,
        'paused': False,
        'reset': False,
        'error_tick': None,
    }

    shared = {}
    gui_proc = None
    if not args.no_gui:
        mgr = Manager()
        shared = mgr.dict()
        shared['gravity'] = settings['gravity']
        shared['wind'] = settings['wind']
        shared['constraint_iterations'] = config.constraint_iterations
        shared['__exit__'] = False
        # dearpygui is only loaded when the panel is requested
        from clothsim import gui_controller
        gui_proc = Process(target=gui_controller.run_gui, args=(shared,), daemon=True)
        gui_proc.start()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    settings['paused'] = not settings['paused']
                elif event.key == pygame.K_r:
                    settings['reset'] = True

        if gui_proc is not None:
            running = apply_shared_controls(shared, world, settings) and running

        if settings['reset']:
            world, projection, links = _new_session(world.config, args.seed)
            settings['reset'] = False
            logger.info("Cloth reset")

        lmb, _, rmb = pygame.mouse.get_pressed()
        if lmb or rmb:
            point = projection.pick(world.positions_array(), pygame.mouse.get_pos())
            if point is not None:
                world.set_fixed(point, lmb)

        if not settings['paused']:
            for force in host_forces(settings, rng):
                world.add_force(force)
            world.step()

        screen.fill(constants.WHITE)
        draw(screen, world, projection, links)
        if settings['paused']:
            text = font.render("PAUSED", True, constants.BLACK)
            screen.blit(text, (constants.WIDTH - text.get_width() - 10, 10))
        tick_surf = font.render(f"Tick: {world.tick}", True, constants.BLACK)
        screen.blit(tick_surf, (10, constants.HEIGHT - 30))

        pygame.display.flip()
        clock.tick(constants.FPS)

    if gui_proc is not None:
        shared['__exit__'] = True
        gui_proc.join(timeout=1.0)

    pygame.quit()


if __name__ == "__main__":
    main()
