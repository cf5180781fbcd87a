"""LineString codec: EWKB <-> GeogLineString."""
from typing import Optional

import shapely

from ..errors import DecodeError
from ..ewkb_header import LINESTRING_TYPE, read_header, write_header
from ..ewkb_reader import EwkbReader
from ..ewkb_writer import EwkbWriter
from ..models.geog_line_string import GeogLineString
from ..models.geog_point import GeogPoint
from .base import GeographyCodec

COORDINATE_SIZE = 16


class LineStringCodec(GeographyCodec):
    """
    LineString codec.

    Layout: header (type 2, optional SRID), point count (uint32), then
    count x/y pairs. Points carry no header or SRID of their own.
    """

    value_type = GeogLineString
    geometry_name = 'LineString'

    def decode(self, data: bytes, strict: Optional[bool] = None) -> GeogLineString:
        """
        Decode a line string.

        Args:
            data: Encoded line string
            strict: Reject trailing bytes (defaults to codec.require_exact_length)

        Raises:
            DecodeError: If the data is truncated, not a line string, or the
                point count does not fit in the remaining bytes
        """
        reader = EwkbReader(data)
        srid = read_header(reader, LINESTRING_TYPE)
        try:
            count = reader.read_uint32()
        except DecodeError as e:
            e.geometry = self.geometry_name
            raise

        # Checked up front so a bogus count never starts a partial read
        needed = count * COORDINATE_SIZE
        if needed > reader.remaining:
            raise DecodeError(
                f"Point count {count} needs {needed} bytes, only {reader.remaining} left",
                reason="count_overflow",
                geometry=self.geometry_name,
            )

        points = []
        for _ in range(count):
            x, y = reader.read_coordinate()
            points.append(GeogPoint(x=x, y=y, srid=srid))

        self._check_consumed(reader, strict)
        return GeogLineString(points=tuple(points), srid=srid)

    def encode(self, value: GeogLineString, out: bytearray, byte_order: Optional[str] = None) -> None:
        """Append the EWKB encoding of ``value`` to ``out``; ``out`` is untouched on failure."""
        encoded = bytearray()
        writer = EwkbWriter(encoded, self._byte_order(byte_order))
        write_header(writer, LINESTRING_TYPE, value.srid)
        writer.write_uint32(len(value.points))
        for point in value.points:
            writer.write_coordinate(point.x, point.y)
        out += encoded


def line_string_to_shapely(line: GeogLineString) -> shapely.LineString:
    """Convert to a Shapely line string, carrying the SRID on the geometry."""
    geom = shapely.LineString([(p.x, p.y) for p in line.points])
    if line.srid is not None:
        geom = shapely.set_srid(geom, line.srid)
    return geom


def line_string_from_shapely(geom: shapely.LineString) -> GeogLineString:
    """Convert from a Shapely line string. Shapely's SRID 0 means no SRID."""
    if not isinstance(geom, shapely.LineString):
        raise TypeError(f"Expected shapely.LineString, got {type(geom).__name__}")
    if geom.has_z:
        raise ValueError("Only 2D line strings are supported")
    srid = int(shapely.get_srid(geom)) or None
    points = tuple(GeogPoint(x=x, y=y, srid=srid) for x, y in geom.coords)
    return GeogLineString(points=points, srid=srid)
