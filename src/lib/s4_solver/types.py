"""Types pour le module s4_solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set


class SolveStatus(str, Enum):
    """Issue d'une résolution."""
    SOLVED = "SOLVED"
    SHAPE_MISMATCH = "SHAPE_MISMATCH"  # len(grid) != width * height
    UNRESOLVED = "UNRESOLVED"          # il reste des cases inconnues (9)
    INCONSISTENT = "INCONSISTENT"      # un indice ne correspond pas aux mines voisines


@dataclass
class PropagationResult:
    """Résultat de la propagation jusqu'au point fixe."""
    grid: List[int]
    rounds: int
    safe_cells: Set[int] = field(default_factory=set)
    flag_cells: Set[int] = field(default_factory=set)
    round_changes: List[int] = field(default_factory=list)  # marquages par passe

    @property
    def has_actions(self) -> bool:
        return bool(self.safe_cells or self.flag_cells)


@dataclass
class SolverReport:
    """Rapport complet d'un appel au solver."""
    status: SolveStatus
    solution: Optional[List[int]] = None
    rounds: int = 0
    safe_count: int = 0
    flag_count: int = 0
    failed_index: Optional[int] = None  # première cellule (row-major) en échec

    @property
    def success(self) -> bool:
        return self.status == SolveStatus.SOLVED

    @property
    def total_marks(self) -> int:
        return self.safe_count + self.flag_count
