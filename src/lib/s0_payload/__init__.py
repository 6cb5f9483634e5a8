"""Module s0_payload : décodage du payload binaire de requête."""

from .types import InvalidPayloadError, Payload
from .decoder import HEADER_SIZE, decode_payload, encode_payload

__all__ = [
    "InvalidPayloadError",
    "Payload",
    "HEADER_SIZE",
    "decode_payload",
    "encode_payload",
]
