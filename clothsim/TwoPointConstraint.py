class TwoPointConstraint:
    """Base class for links between two particles addressed by grid coordinate."""
    def __init__(self, a, b):
        self.a = tuple(a)
        self.b = tuple(b)

    def endpoints(self, particles):
        return particles[self.a], particles[self.b]

    def update(self, particles, time_step):
        """Apply one correction. To be implemented by subclasses."""
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} a={self.a} b={self.b}>"

    def __str__(self):
        return self.__repr__()
