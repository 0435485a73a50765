from .DistanceConstraint import DistanceConstraint
from .Particle import Particle
from .Vec3 import Point3, Vec3, Vector3
from .config import SimConfig
from .grid import Grid
from .world import PositionView, World, create_cloth

__all__ = [
    "DistanceConstraint",
    "Grid",
    "Particle",
    "Point3",
    "PositionView",
    "SimConfig",
    "Vec3",
    "Vector3",
    "World",
    "create_cloth",
]
