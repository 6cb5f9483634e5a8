"""Types pour le module s0_payload."""

from dataclasses import dataclass, field
from typing import List


class InvalidPayloadError(ValueError):
    """Payload mal formé (trop court, dimensions hors bornes, grille tronquée)."""


@dataclass
class Payload:
    """Requête décodée : dimensions + buffer de grille row-major."""
    width: int
    height: int
    grid: List[int] = field(default_factory=list)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def has_exact_shape(self) -> bool:
        return len(self.grid) == self.cell_count
