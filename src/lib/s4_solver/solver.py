"""Solver principal : propagation jusqu'au point fixe puis validation."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .reducer import IterativePropagator
from .types import SolverReport, SolveStatus
from .validator import validate_solution


class Solver:
    """
    Orchestrateur du solver.

    Aucun état partagé entre deux appels : chaque résolution travaille sur
    sa propre copie de la grille.
    """

    def solve_with_report(self, grid: Sequence[int], width: int, height: int) -> SolverReport:
        """Résout la grille et détaille la cause d'un éventuel échec."""
        if width < 0 or height < 0 or len(grid) != width * height:
            return SolverReport(status=SolveStatus.SHAPE_MISMATCH)

        # Phase 1: propagation locale
        propagation = IterativePropagator(grid, width, height).propagate()

        # Phase 2: validation globale
        status, failed_index = validate_solution(propagation.grid, width, height)

        return SolverReport(
            status=status,
            solution=propagation.grid if status == SolveStatus.SOLVED else None,
            rounds=propagation.rounds,
            safe_count=len(propagation.safe_cells),
            flag_count=len(propagation.flag_cells),
            failed_index=failed_index,
        )

    def solve(self, grid: Sequence[int], width: int, height: int) -> Optional[List[int]]:
        """Retourne la grille résolue, ou None (forme, indéterminée ou incohérente)."""
        return self.solve_with_report(grid, width, height).solution


# === API fonctionnelle ===

_default_solver: Optional[Solver] = None


def _get_solver() -> Solver:
    global _default_solver
    if _default_solver is None:
        _default_solver = Solver()
    return _default_solver


def solve(grid: Sequence[int], width: int, height: int) -> Optional[List[int]]:
    """Résout le démineur (API fonctionnelle)."""
    return _get_solver().solve(grid, width, height)


def solve_with_report(grid: Sequence[int], width: int, height: int) -> SolverReport:
    return _get_solver().solve_with_report(grid, width, height)


try_to_solve = solve
