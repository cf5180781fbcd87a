"""Bounds-checked EWKB binary reader."""
import io
import struct

from .errors import DecodeError


BIG_ENDIAN = 0
LITTLE_ENDIAN = 1


class EwkbReader:
    """Binary reader over an in-memory buffer with a switchable byte order.

    Every read checks the remaining length first, so a short buffer raises
    DecodeError instead of struct.error.
    """

    def __init__(self, data: bytes):
        """Initialize with the whole encoded value."""
        self._stream = io.BytesIO(bytes(data))
        self._length = len(data)
        self._prefix = '<'

    def set_byte_order(self, marker: int) -> None:
        """Switch the order used by all following multi-byte reads."""
        if marker == LITTLE_ENDIAN:
            self._prefix = '<'
        elif marker == BIG_ENDIAN:
            self._prefix = '>'
        else:
            raise DecodeError(f"Unrecognized byte-order marker: {marker}", reason="byte_order")

    def _read(self, size: int, what: str) -> bytes:
        if self.remaining < size:
            raise DecodeError(
                f"Unexpected end of data reading {what}: need {size} bytes at offset "
                f"{self.position}, {self.remaining} left",
                reason="truncated",
            )
        return self._stream.read(size)

    def read_byte(self) -> int:
        """Read a single unsigned byte."""
        return self._read(1, 'byte')[0]

    def read_uint32(self) -> int:
        """Read uint32 in the current byte order."""
        return struct.unpack(self._prefix + 'I', self._read(4, 'uint32'))[0]

    def read_int32(self) -> int:
        """Read int32 in the current byte order."""
        return struct.unpack(self._prefix + 'i', self._read(4, 'int32'))[0]

    def read_coordinate(self):
        """Read an (x, y) pair of doubles."""
        return struct.unpack(self._prefix + 'dd', self._read(16, 'coordinate'))

    @property
    def position(self) -> int:
        """Get current stream position."""
        return self._stream.tell()

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return self._length - self._stream.tell()
