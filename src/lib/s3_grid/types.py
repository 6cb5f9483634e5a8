"""Types pour le module s3_grid."""

from enum import IntEnum
from typing import List, Sequence, Tuple

from src.config import CELL_VALUES


Coord = Tuple[int, int]


class CellValue(IntEnum):
    """Valeurs remarquables d'une cellule (0-8 = indice)."""
    SAFE = CELL_VALUES['safe']
    MAX_CLUE = CELL_VALUES['max_clue']
    UNKNOWN = CELL_VALUES['unknown']
    MINE = CELL_VALUES['mine']


def is_clue(value: int) -> bool:
    """Une cellule est une contrainte si elle porte un indice (0-8)."""
    return value <= CellValue.MAX_CLUE


def to_index(x: int, y: int, width: int) -> int:
    return y * width + x


def to_coord(index: int, width: int) -> Coord:
    return (index % width, index // width)


def adjacent_indices(x: int, y: int, width: int, height: int) -> List[int]:
    """
    Retourne les indices (row-major) des voisins de Moore d'une cellule.

    Les voisins hors grille sont ignorés : 3 voisins pour un coin,
    5 pour un bord, 8 à l'intérieur. Ordre : dy externe, dx interne.
    """
    indices = []
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                indices.append(to_index(nx, ny, width))
    return indices


def count_values(grid: Sequence[int], indices: Sequence[int], value: int) -> int:
    return sum(1 for i in indices if grid[i] == value)
