import heapq
import logging
import math
import random

import numpy as np

from .Particle import Particle
from .Vec3 import Vec3
from .collision import resolve_collisions
from .config import SimConfig
from .grid import Grid
from .solvers.cloth import ClothSolver

logger = logging.getLogger(__name__)


class PositionView:
    """Live, restartable view of particle positions in row-major order."""

    def __init__(self, particles):
        self._particles = particles

    def __iter__(self):
        for p in self._particles:
            yield (p.pos.x, p.pos.y, p.pos.z)

    def __len__(self):
        return len(self._particles)

    def __repr__(self):
        return f"<PositionView n={len(self)}>"


class World:
    def __init__(self, particles, config=None):
        """
        A cloth system: owns the particle grid and the constraint network
        built over it.

        :param particles: Grid of Particle objects, row-major.
        :param config: SimConfig; defaults are used when omitted.
        """
        self.config = config if config is not None else SimConfig()
        self.particles = particles
        self.tick = 0

        self.cloth_solver = ClothSolver()
        self.cloth_solver.build_constraints(self.particles)

        logger.info(f"Cloth world ready: {len(self.particles)} particles "
                    f"({self.particles.width}x{self.particles.height}), "
                    f"{len(self.constraints)} constraints")

    @classmethod
    def from_positions(cls, positions, width, config=None, pin_corners=False, mass=1.0):
        """
        Build a world from an explicit row-major list of 3-D points.
        """
        particles = Grid([Particle(p, mass=mass) for p in positions], width)
        world = cls(particles, config)
        if pin_corners:
            world.pin_corners()
        return world

    @property
    def constraints(self):
        return self.cloth_solver.constraints

    def pin_corners(self):
        """Pin the four grid corners, two cells deep along each edge."""
        w, h = self.particles.width, self.particles.height
        corners = [(0, 0), (1, 0), (w - 2, 0), (w - 1, 0),
                   (0, h - 1), (1, h - 1), (w - 2, h - 1), (w - 1, h - 1)]
        for coord in corners:
            self.particles[coord].fixed = True
        return corners

    def add_force(self, force):
        force = Vec3.of(force)
        for p in self.particles:
            p.apply_force(force)

    def step(self):
        """
        Advance one fixed time step: relax constraints, integrate every
        particle, then push apart particles that came too close.

        Returns the number of collision corrections applied.
        """
        config = self.config

        self.cloth_solver.solve(self)

        for p in self.particles:
            p.integrate(config.damping, config.dt_sq)

        corrections = 0
        if config.collisions:
            corrections = resolve_collisions(self.particles.data, config.collision_epsilon)
            if corrections:
                logger.debug(f"tick {self.tick}: {corrections} collision corrections")

        self.tick += 1
        return corrections

    def set_fixed(self, point, fixed):
        """
        Pin (or release) the particles nearest to ``point``.

        Selects ``config.pin_count`` particles by squared distance with a
        bounded heap; ties keep grid order and NaN distances sort last.
        Returns the flat indices that were touched.
        """
        point = Vec3.of(point)
        data = self.particles.data

        def dist_sq(i):
            d = (data[i].pos - point).length_sq()
            return math.inf if math.isnan(d) else d

        nearest = heapq.nsmallest(self.config.pin_count, range(len(data)), key=dist_sq)
        for i in nearest:
            data[i].fixed = bool(fixed)

        logger.debug(f"{'Pinned' if fixed else 'Released'} {len(nearest)} particles near {point}")
        return nearest

    def pinned_indices(self):
        return [i for i, p in enumerate(self.particles) if p.fixed]

    def positions(self):
        return PositionView(self.particles)

    def positions_array(self, dtype=np.float32):
        n = len(self.particles)
        return np.fromiter((c for p in self.particles for c in (p.pos.x, p.pos.y, p.pos.z)),
                           dtype=dtype, count=3 * n).reshape(n, 3)

    def constraint_error(self):
        return self.cloth_solver.max_error(self.particles)

    def __repr__(self):
        return (f"<World {self.particles.width}x{self.particles.height} "
                f"constraints={len(self.constraints)} tick={self.tick}>")


def create_cloth(width=None, height=None, subdivisions=None, config=None, seed=None, pin_corners=True):
    """
    Creates a hanging cloth world.

    :param width: Cloth extent along x.
    :param height: Cloth extent along -y.
    :param subdivisions: Particles per side.
    :param config: Base SimConfig; explicit arguments above override it.
    :param seed: Seed for the small depth jitter, for reproducible layouts.
    :param pin_corners: Pin the corner patches at start.
    :return: (world, position view)
    """
    config = config if config is not None else SimConfig()
    overrides = {k: v for k, v in (('width', width), ('height', height), ('subdivisions', subdivisions))
                 if v is not None}
    if overrides:
        config = config.replace(**overrides)

    rng = random.Random(seed)
    n = config.subdivisions
    positions = []
    for y in range(n):
        for x in range(n):
            fy = y / n
            positions.append((
                config.width * (x / n),
                -config.height * fy,
                0.5 * config.height * fy + config.depth_offset + rng.uniform(0.0, config.depth_jitter),
            ))

    world = World.from_positions(positions, n, config, pin_corners=pin_corners)
    return world, world.positions()
