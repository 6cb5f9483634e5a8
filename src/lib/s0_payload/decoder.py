"""Décodage / encodage du payload binaire [largeur, hauteur, cellules...]."""

from typing import Sequence, Union

from src.config import MAX_SIZE
from .types import InvalidPayloadError, Payload

BytesLike = Union[bytes, bytearray, memoryview, Sequence[int]]

HEADER_SIZE = 2


def decode_payload(data: BytesLike) -> Payload:
    """
    Extrait (width, height, grid) d'un payload brut.

    Les contrôles "bon marché" sont faits en premier. La grille reprend
    tous les octets après l'en-tête : un surplus d'octets n'est pas une
    erreur de décodage, il est détecté par le solver (forme incorrecte).

    Raises:
        InvalidPayloadError: payload trop court, dimension nulle ou > MAX_SIZE,
            ou pas assez d'octets pour width*height cellules.
    """
    try:
        raw = bytes(data)
    except (ValueError, TypeError) as e:
        raise InvalidPayloadError(f"payload non convertible en octets : {e}") from e
    if len(raw) < HEADER_SIZE:
        raise InvalidPayloadError(f"payload trop court ({len(raw)} octets, en-tête de {HEADER_SIZE} requis)")

    width, height = raw[0], raw[1]
    if width > MAX_SIZE or height > MAX_SIZE:
        raise InvalidPayloadError(f"dimensions {width}x{height} hors bornes (max {MAX_SIZE})")
    if width == 0 or height == 0:
        raise InvalidPayloadError(f"dimensions {width}x{height} nulles")
    if len(raw) < HEADER_SIZE + width * height:
        raise InvalidPayloadError(
            f"grille tronquée : {len(raw) - HEADER_SIZE} cellules pour {width}x{height}"
        )

    return Payload(width=width, height=height, grid=list(raw[HEADER_SIZE:]))


def encode_payload(width: int, height: int, grid: Sequence[int]) -> bytes:
    """Construit un payload : en-tête (width, height) puis les cellules."""
    return bytes([width, height]) + bytes(int(v) for v in grid)
