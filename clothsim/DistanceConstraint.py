import logging

from clothsim.TwoPointConstraint import TwoPointConstraint

logger = logging.getLogger(__name__)

STRUCTURAL = "structural"
SHEAR = "shear"
FLEXION = "flexion"


class DistanceConstraint(TwoPointConstraint):
    def __init__(self, a, b, particles, kind=STRUCTURAL):
        super().__init__(a, b)
        self.kind = kind
        # rest length is whatever the layout gives at build time
        p1, p2 = self.endpoints(particles)
        self._rest_length = (p1.pos - p2.pos).length()

    @property
    def rest_length(self):
        return self._rest_length

    def current_length(self, particles):
        p1, p2 = self.endpoints(particles)
        return (p2.pos - p1.pos).length()

    def error(self, particles):
        return abs(self.current_length(particles) - self._rest_length)

    def update(self, particles, time_step):
        """
        Pull both endpoints toward the rest length by a ``time_step``
        fraction of the current error. Coincident endpoints are skipped.
        """
        p1, p2 = self.endpoints(particles)
        delta = p2.pos - p1.pos
        distance = delta.length()
        if distance == 0.0:
            logger.debug(f"Skipping zero-length link {self.a}-{self.b}")
            return
        correction = delta * (time_step * (distance - self._rest_length) / distance)
        p1.offset(correction)
        p2.offset(-correction)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.kind} a={self.a} b={self.b} rest={self._rest_length:.4f}>"
