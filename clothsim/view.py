"""
Screen mapping for the demo host: a front-on orthographic projection of
the cloth onto the window, and pointer picking back into 3-D.
"""

import numpy as np


class Projection:
    def __init__(self, scale, offset_x, offset_y):
        self.scale = float(scale)
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)

    @classmethod
    def fit(cls, positions, screen_size, margin=0.1):
        """Scale and centre the x/y extent of ``positions`` inside the window."""
        positions = np.asarray(positions, dtype=np.float64)
        sw, sh = screen_size
        lo = positions[:, :2].min(axis=0)
        hi = positions[:, :2].max(axis=0)
        span = np.maximum(hi - lo, 1e-9)
        usable = 1.0 - 2.0 * margin
        scale = min(sw * usable / span[0], sh * usable / span[1])
        centre = (lo + hi) * 0.5
        # screen y grows downward, world y grows upward
        return cls(scale, sw * 0.5 - centre[0] * scale, sh * 0.5 + centre[1] * scale)

    def project(self, positions):
        positions = np.asarray(positions, dtype=np.float64)
        sx = positions[:, 0] * self.scale + self.offset_x
        sy = -positions[:, 1] * self.scale + self.offset_y
        return np.stack([sx, sy], axis=1)

    def pick(self, positions, screen_pos, radius=20.0):
        """
        Return the 3-D position of the particle drawn nearest to
        ``screen_pos``, or None when nothing lies within ``radius`` pixels.
        """
        positions = np.asarray(positions, dtype=np.float64)
        if len(positions) == 0:
            return None
        screen = self.project(positions)
        d2 = np.sum((screen - np.asarray(screen_pos, dtype=np.float64)) ** 2, axis=1)
        i = int(np.argmin(d2))
        if d2[i] > radius * radius:
            return None
        return tuple(float(c) for c in positions[i])
