class solver:
    def __init__(self, enabled=True):
        self.enabled = bool(enabled)

    def solve(self, world):
        """
        Placeholder for a solver.
        """
        pass

    def __repr__(self):
        return f"<{self.__class__.__name__} enabled={self.enabled}>"

    def __str__(self):
        return self.__repr__()
