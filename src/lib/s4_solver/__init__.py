"""Module s4_solver : résolution du démineur par propagation de contraintes.

API publique :
    solve(grid, width, height) → Optional[List[int]]
    solve_with_report(grid, width, height) → SolverReport
"""

from .types import PropagationResult, SolverReport, SolveStatus
from .solver import Solver, solve, solve_with_report, try_to_solve
from .reducer import IterativePropagator
from .validator import count_adjacent_mines, validate_solution

__all__ = [
    # Types
    "PropagationResult",
    "SolverReport",
    "SolveStatus",
    # Solver
    "Solver",
    "solve",
    "solve_with_report",
    "try_to_solve",
    # Composants
    "IterativePropagator",
    "count_adjacent_mines",
    "validate_solution",
]
