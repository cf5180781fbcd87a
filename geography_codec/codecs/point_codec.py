"""Point codec: EWKB <-> GeogPoint."""
from typing import Optional

import shapely

from ..errors import DecodeError
from ..ewkb_header import POINT_TYPE, read_header, write_header
from ..ewkb_reader import EwkbReader
from ..ewkb_writer import EwkbWriter
from ..models.geog_point import GeogPoint
from .base import GeographyCodec


class PointCodec(GeographyCodec):
    """
    Point codec.

    Layout: header (type 1, optional SRID) followed by x and y as 8-byte floats.
    """

    value_type = GeogPoint
    geometry_name = 'Point'

    def decode(self, data: bytes, strict: Optional[bool] = None) -> GeogPoint:
        """
        Decode a point.

        Args:
            data: Encoded point
            strict: Reject trailing bytes (defaults to codec.require_exact_length)

        Raises:
            DecodeError: If the data is truncated, not a point, or malformed
        """
        reader = EwkbReader(data)
        srid = read_header(reader, POINT_TYPE)
        try:
            x, y = reader.read_coordinate()
        except DecodeError as e:
            e.geometry = self.geometry_name
            raise
        self._check_consumed(reader, strict)
        return GeogPoint(x=x, y=y, srid=srid)

    def encode(self, value: GeogPoint, out: bytearray, byte_order: Optional[str] = None) -> None:
        """Append the EWKB encoding of ``value`` to ``out``; ``out`` is untouched on failure."""
        encoded = bytearray()
        writer = EwkbWriter(encoded, self._byte_order(byte_order))
        write_header(writer, POINT_TYPE, value.srid)
        writer.write_coordinate(value.x, value.y)
        out += encoded


def point_to_shapely(point: GeogPoint) -> shapely.Point:
    """Convert to a Shapely point, carrying the SRID on the geometry."""
    geom = shapely.Point(point.x, point.y)
    if point.srid is not None:
        geom = shapely.set_srid(geom, point.srid)
    return geom


def point_from_shapely(geom: shapely.Point) -> GeogPoint:
    """Convert from a Shapely point. Shapely's SRID 0 means no SRID."""
    if not isinstance(geom, shapely.Point):
        raise TypeError(f"Expected shapely.Point, got {type(geom).__name__}")
    if geom.is_empty:
        raise ValueError("Cannot convert an empty point")
    if geom.has_z:
        raise ValueError("Only 2D points are supported")
    srid = int(shapely.get_srid(geom))
    return GeogPoint(x=geom.x, y=geom.y, srid=srid or None)
