"""Validation globale d'une grille après propagation."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from src.lib.s3_grid.types import CellValue, adjacent_indices, count_values, is_clue, to_index
from .types import SolveStatus


def count_adjacent_mines(grid: Sequence[int], x: int, y: int, width: int, height: int) -> int:
    """Compte les mines (10) parmi les voisins de (x, y)."""
    return count_values(grid, adjacent_indices(x, y, width, height), CellValue.MINE)


def validate_solution(grid: Sequence[int], width: int, height: int) -> Tuple[SolveStatus, Optional[int]]:
    """
    Vérifie la grille en row-major et s'arrête sur la première erreur.

    Returns:
        (SOLVED, None) si aucune case inconnue ne subsiste et que chaque
        indice correspond exactement à ses mines voisines, sinon
        (UNRESOLVED | INCONSISTENT, index de la cellule fautive).
        Les mines (10) ne sont pas vérifiées.
    """
    for y in range(height):
        for x in range(width):
            idx = to_index(x, y, width)
            cell = grid[idx]

            if cell == CellValue.UNKNOWN:
                return SolveStatus.UNRESOLVED, idx

            if is_clue(cell) and count_adjacent_mines(grid, x, y, width, height) != cell:
                return SolveStatus.INCONSISTENT, idx

    return SolveStatus.SOLVED, None
