"""Errors raised while decoding geography column values."""
from typing import Optional


class DecodeError(ValueError):
    """Raised when bytes cannot be decoded into a geography value.

    ``reason`` is a short machine-readable tag (truncated, byte_order,
    type_mismatch, count_overflow, dimension, trailing_bytes, hex) used for
    metrics labels; ``geometry`` names the expected geometry when known.
    """

    def __init__(self, message: str, reason: str, geometry: Optional[str] = None):
        super().__init__(message)
        self.reason = reason
        self.geometry = geometry


class SerializationDisabledError(RuntimeError):
    """Raised when human-readable serialization is used without being enabled."""
