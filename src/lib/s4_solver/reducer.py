"""Propagation de contraintes locales jusqu'au point fixe."""

from __future__ import annotations

from typing import Dict, List, Sequence

from src.lib.s3_grid.types import CellValue, adjacent_indices, is_clue, to_coord
from .types import PropagationResult


class IterativePropagator:
    """
    Propagation contrainte itérative sur une copie privée de la grille.

    Chaque passe parcourt la grille en row-major et applique, pour chaque
    indice :
    - Règle A : mines voisines == indice → voisins inconnus sûrs (0).
    - Règle B : indice - mines == inconnus (> 0) → voisins inconnus mines (10).

    Les marquages sont monotones (9 → 0 ou 9 → 10), la boucle s'arrête à la
    première passe qui ne marque rien.
    """

    def __init__(self, grid: Sequence[int], width: int, height: int):
        self.width = width
        self.height = height
        self.grid: List[int] = [int(v) for v in grid]
        self.neighbors_cache: Dict[int, List[int]] = {}
        self._precompute_neighbors()

    def _precompute_neighbors(self) -> None:
        """Précalcule les voisins pour toutes les cellules."""
        for idx in range(self.width * self.height):
            x, y = to_coord(idx, self.width)
            self.neighbors_cache[idx] = adjacent_indices(x, y, self.width, self.height)

    def _mark(self, indices: List[int], value: int, marked: set) -> int:
        changes = 0
        for idx in indices:
            if self.grid[idx] == CellValue.UNKNOWN:
                self.grid[idx] = int(value)
                marked.add(idx)
                changes += 1
        return changes

    def run_round(self, safe_cells: set, flag_cells: set) -> int:
        """Exécute une passe complète et retourne le nombre de cellules marquées."""
        changes = 0
        for idx in range(self.width * self.height):
            clue = self.grid[idx]
            if not is_clue(clue):
                continue

            neighbors = self.neighbors_cache[idx]
            mine_count = 0
            unknown_count = 0
            for n in neighbors:
                if self.grid[n] == CellValue.UNKNOWN:
                    unknown_count += 1
                elif self.grid[n] == CellValue.MINE:
                    mine_count += 1

            # Règle A: toutes les mines trouvées → voisins sûrs
            if mine_count == clue:
                changes += self._mark(neighbors, CellValue.SAFE, safe_cells)

            # Règle B: autant d'inconnus que de mines restantes → tous mines
            # (clue >= mine_count : sinon la grille est déjà incohérente)
            if unknown_count > 0 and clue >= mine_count and clue - mine_count == unknown_count:
                changes += self._mark(neighbors, CellValue.MINE, flag_cells)

        return changes

    def propagate(self) -> PropagationResult:
        """Enchaîne les passes jusqu'au point fixe."""
        safe_cells: set = set()
        flag_cells: set = set()
        round_changes: List[int] = []

        while True:
            changes = self.run_round(safe_cells, flag_cells)
            round_changes.append(changes)
            if changes == 0:
                break

        return PropagationResult(
            grid=self.grid,
            rounds=len(round_changes),
            safe_cells=safe_cells,
            flag_cells=flag_cells,
            round_changes=round_changes,
        )
