"""
Shared EWKB header handling.

Header layout (all multi-byte fields in the order given by the first byte):
- Byte order marker (1 byte: 0 = big-endian, 1 = little-endian)
- Type word (4 bytes: geometry type code in the low bits, flags in the high bits)
- SRID (4 bytes, signed, only present when the has-SRID flag is set)
"""
from typing import Optional

from .errors import DecodeError
from .ewkb_reader import EwkbReader
from .ewkb_writer import EwkbWriter

# Geometry type codes
POINT_TYPE = 1
LINESTRING_TYPE = 2

GEOMETRY_NAMES = {
    POINT_TYPE: 'Point',
    LINESTRING_TYPE: 'LineString',
}

# Type word flags
Z_FLAG = 0x80000000
M_FLAG = 0x40000000
SRID_FLAG = 0x20000000
TYPE_MASK = 0x0FFFFFFF

SRID_MIN = -2 ** 31
SRID_MAX = 2 ** 31 - 1


def read_header(reader: EwkbReader, expected_type: int) -> Optional[int]:
    """
    Read the header and check it announces ``expected_type``.

    Returns:
        The SRID, or None when the has-SRID flag is unset

    Raises:
        DecodeError: On truncation, an unknown byte-order marker, Z/M
            coordinates or a geometry type other than ``expected_type``
    """
    geometry = GEOMETRY_NAMES.get(expected_type)
    try:
        marker = reader.read_byte()
        reader.set_byte_order(marker)
        type_word = reader.read_uint32()

        if type_word & (Z_FLAG | M_FLAG):
            raise DecodeError(
                f"Unsupported coordinate dimension flags in type word 0x{type_word:08X}",
                reason="dimension",
            )

        srid = None
        if type_word & SRID_FLAG:
            srid = reader.read_int32()
    except DecodeError as e:
        e.geometry = e.geometry or geometry
        raise

    type_code = type_word & TYPE_MASK
    if type_code != expected_type:
        raise DecodeError(
            f"Expected {geometry} (type {expected_type}), got type code {type_code}",
            reason="type_mismatch",
            geometry=geometry,
        )

    return srid


def write_header(writer: EwkbWriter, geometry_type: int, srid: Optional[int]) -> None:
    """
    Write the byte-order marker, type word and optional SRID.

    Raises:
        ValueError: If ``srid`` does not fit in a signed 32-bit integer
    """
    if srid is not None and not (SRID_MIN <= srid <= SRID_MAX):
        raise ValueError(f"SRID {srid} out of range for a signed 32-bit integer")
    writer.write_byte(writer.marker)
    if srid is None:
        writer.write_uint32(geometry_type)
    else:
        writer.write_uint32(geometry_type | SRID_FLAG)
        writer.write_int32(srid)
