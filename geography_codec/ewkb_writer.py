"""Appending EWKB binary writer."""
import struct

from .ewkb_reader import BIG_ENDIAN, LITTLE_ENDIAN


BYTE_ORDER_MARKERS = {
    'little': LITTLE_ENDIAN,
    'big': BIG_ENDIAN,
}


class EwkbWriter:
    """Writes EWKB primitives to the end of a caller-supplied bytearray."""

    def __init__(self, out: bytearray, byte_order: str = 'little'):
        if out is None:
            raise ValueError("out cannot be None")
        if byte_order not in BYTE_ORDER_MARKERS:
            raise ValueError(f"Unsupported byte order: {byte_order!r} (expected 'little' or 'big')")
        self._out = out
        self.marker = BYTE_ORDER_MARKERS[byte_order]
        self._prefix = '<' if self.marker == LITTLE_ENDIAN else '>'

    def write_byte(self, value: int) -> None:
        self._out.append(value)

    def write_uint32(self, value: int) -> None:
        self._out += struct.pack(self._prefix + 'I', value)

    def write_int32(self, value: int) -> None:
        self._out += struct.pack(self._prefix + 'i', value)

    def write_coordinate(self, x: float, y: float) -> None:
        self._out += struct.pack(self._prefix + 'dd', x, y)
