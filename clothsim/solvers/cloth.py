import logging

from clothsim.DistanceConstraint import FLEXION, SHEAR, STRUCTURAL, DistanceConstraint
from .solver import solver

logger = logging.getLogger(__name__)


class ClothSolver(solver):
    def __init__(self, enabled=True):
        """
        Relaxes the mass-spring network of a particle grid toward its rest lengths.
        Sweep count and correction factor come from the world's config on each solve.
        """
        super().__init__(enabled)
        self.constraints: list[DistanceConstraint] = []

    def build_constraints(self, particles):
        """
        Builds structural, shear and flexion links for every cell of the grid.
        Rest lengths are taken from the particle layout at this moment.
        """
        self.constraints = []
        width, height = particles.width, particles.height

        def link(a, b, kind):
            if particles.in_bounds(*b):
                self.constraints.append(DistanceConstraint(a, b, particles, kind))

        for y in range(height):
            for x in range(width):
                # Structural (horizontal and vertical)
                link((x, y), (x + 1, y), STRUCTURAL)
                link((x, y), (x, y + 1), STRUCTURAL)

                # Shear (both diagonals of the cell)
                if x + 1 < width and y + 1 < height:
                    link((x, y), (x + 1, y + 1), SHEAR)
                    link((x + 1, y), (x, y + 1), SHEAR)

                # Flexion (two cells apart)
                link((x, y), (x + 2, y), FLEXION)
                link((x, y), (x, y + 2), FLEXION)

        logger.debug(f"Built {len(self.constraints)} constraints for a {width}x{height} grid")
        return self.constraints

    def relax(self, particles, iterations, time_step):
        """
        Gauss-Seidel sweeps over every constraint. Corrections are applied in
        place, so later constraints in the same sweep see earlier ones.
        """
        for _ in range(int(iterations)):
            for c in self.constraints:
                c.update(particles, time_step)

    def solve(self, world):
        if not self.enabled:
            return
        config = world.config
        self.relax(world.particles, config.constraint_iterations, config.dt)

    def max_error(self, particles):
        return max((c.error(particles) for c in self.constraints), default=0.0)
