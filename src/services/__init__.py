"""Services du solveur Démineur."""

from .s4_solver_service import SolverService

__all__ = [
    "SolverService",
]
