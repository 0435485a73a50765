"""Immutable simulation parameters handed to each cloth world."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from clothsim import constants


@dataclass(frozen=True)
class SimConfig:
    dt: float = constants.DT
    damping: float = constants.DAMPING
    constraint_iterations: int = constants.CONSTRAINTS_ITER
    collision_epsilon: float = constants.EPSILON
    subdivisions: int = constants.SUBDIVISIONS
    width: float = constants.CLOTH_WIDTH
    height: float = constants.CLOTH_HEIGHT
    pin_count: int = constants.PIN_COUNT
    depth_offset: float = constants.DEPTH_OFFSET
    depth_jitter: float = constants.DEPTH_JITTER
    collisions: bool = True

    def __post_init__(self):
        if not self.dt > 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if not 0.0 <= self.damping <= 1.0:
            raise ValueError(f"damping must lie in [0, 1], got {self.damping}")
        if self.constraint_iterations < 0:
            raise ValueError(f"constraint_iterations must be >= 0, got {self.constraint_iterations}")
        if self.collision_epsilon < 0.0:
            raise ValueError(f"collision_epsilon must be >= 0, got {self.collision_epsilon}")
        if self.subdivisions < 2:
            raise ValueError(f"subdivisions must be >= 2, got {self.subdivisions}")
        if not (self.width > 0.0 and self.height > 0.0):
            raise ValueError(f"cloth size must be positive, got {self.width}x{self.height}")
        if self.pin_count < 0:
            raise ValueError(f"pin_count must be >= 0, got {self.pin_count}")
        if self.depth_jitter < 0.0:
            raise ValueError(f"depth_jitter must be >= 0, got {self.depth_jitter}")

    @property
    def dt_sq(self) -> float:
        return self.dt * self.dt

    def replace(self, **changes) -> SimConfig:
        return dataclasses.replace(self, **changes)
