"""Rendu texte d'une grille (diagnostic uniquement)."""

from typing import Sequence


def grid_to_string(grid: Sequence[int], width: int) -> str:
    """
    Affiche la grille ligne par ligne, chiffres séparés par un espace.

    Une dernière ligne incomplète est affichée telle quelle.
    """
    if width <= 0:
        return ""
    values = [int(v) for v in grid]
    rows = [values[i:i + width] for i in range(0, len(values), width)]
    return "\n".join(" ".join(str(v) for v in row) for row in rows)
