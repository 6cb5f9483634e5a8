"""
Générateur de grilles aléatoires pour les tests et le mode --random.

Les valeurs sont tirées uniformément dans GENERATOR_CONFIG['value_range']
(0-9 par défaut : indices et cases inconnues, jamais de mine posée).
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from src.config import GENERATOR_CONFIG
from src.lib.s0_payload import encode_payload


def random_grid(
    width: int,
    height: int,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[int]:
    """Retourne une grille row-major de width*height valeurs aléatoires."""
    rng = rng if rng is not None else np.random.default_rng(seed)
    low, high = GENERATOR_CONFIG['value_range']
    values = rng.integers(low, high, size=width * height, dtype=np.uint8)
    return values.tolist()


def random_payload(
    width: int,
    height: int,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> bytes:
    """Grille aléatoire préfixée par ses dimensions (format payload)."""
    return encode_payload(width, height, random_grid(width, height, seed=seed, rng=rng))
