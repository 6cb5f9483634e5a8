"""Module s3_grid : constantes de cellules, voisinage, rendu et génération."""

from .types import (
    CellValue,
    Coord,
    adjacent_indices,
    count_values,
    is_clue,
    to_coord,
    to_index,
)
from .format import grid_to_string
from .generator import random_grid, random_payload

__all__ = [
    # Types
    "CellValue",
    "Coord",
    # Voisinage
    "adjacent_indices",
    "count_values",
    "is_clue",
    "to_coord",
    "to_index",
    # Rendu / génération
    "grid_to_string",
    "random_grid",
    "random_payload",
]
