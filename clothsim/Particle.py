from clothsim.Vec3 import Vec3


class Particle:
    def __init__(self, pos, mass=1.0, fixed=False):
        self.pos = Vec3.of(pos)
        # Verlet state: velocity is implied by pos - old_pos
        self.old_pos = self.pos.copy()
        self.acceleration = Vec3.zero()

        self._mass = 1.0
        self.mass = mass
        self.fixed = bool(fixed)

    @property
    def mass(self):
        return self._mass

    @mass.setter
    def mass(self, value):
        value = float(value)
        if not value > 0.0:
            raise ValueError(f"particle mass must be positive, got {value}")
        self._mass = value

    def apply_force(self, force):
        self.acceleration = self.acceleration + force / self._mass

    def offset(self, delta):
        # positional correction used by the constraint and collision passes
        if not self.fixed:
            self.pos = self.pos + delta

    def integrate(self, damping, dt_sq):
        """
        Damped Verlet step. Pinned particles are left untouched, including
        their old position and pending acceleration.
        """
        if self.fixed:
            return
        previous = self.pos
        self.pos = self.pos + (self.pos - self.old_pos) * damping + self.acceleration * dt_sq
        self.old_pos = previous
        self.acceleration = Vec3.zero()

    def __repr__(self):
        return (f"Particle(pos=({self.pos.x:.2f}, {self.pos.y:.2f}, {self.pos.z:.2f}), "
                f"mass={self.mass}, fixed={self.fixed})")

    def __str__(self):
        return self.__repr__()
