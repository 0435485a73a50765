from .cloth import ClothSolver
from .solver import solver

__all__ = ["ClothSolver", "solver"]
