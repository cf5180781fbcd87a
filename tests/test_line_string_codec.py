import struct

import pytest
import shapely

from geography_codec import (
    DecodeError,
    GeogLineString,
    GeogPoint,
    LineStringCodec,
    PointCodec,
    line_string_from_shapely,
    line_string_to_shapely,
)


codec = LineStringCodec()

P1 = GeogPoint(-122.4194, 37.7749)
P2 = GeogPoint(-118.2437, 34.0522)
P3 = GeogPoint(-73.9857, 40.7484)


def test_empty_line_round_trip():
    line = GeogLineString(points=(), srid=None)
    data = codec.encode_to_bytes(line, byte_order='little')
    assert len(data) == 9
    assert struct.unpack('<I', data[5:9])[0] == 0
    assert codec.decode(data) == GeogLineString(points=(), srid=None)


def test_three_point_round_trip():
    line = GeogLineString.create([P1, P2, P3], srid=4326)
    decoded = codec.decode(codec.encode_to_bytes(line))
    assert len(decoded.points) == 3
    assert [(p.x, p.y) for p in decoded.points] == [(P1.x, P1.y), (P2.x, P2.y), (P3.x, P3.y)]
    assert decoded.srid == 4326
    assert decoded == line


def test_layout_has_single_header():
    line = GeogLineString.create([P1, P2], srid=4326)
    data = codec.encode_to_bytes(line, byte_order='little')
    # marker + type + srid + count + 2 coordinates
    assert len(data) == 1 + 4 + 4 + 4 + 32
    assert struct.unpack('<I', data[1:5])[0] == 0x20000002
    assert struct.unpack('<i', data[5:9])[0] == 4326
    assert struct.unpack('<I', data[9:13])[0] == 2
    assert struct.unpack('<dd', data[13:29]) == (P1.x, P1.y)


def test_decoded_points_mirror_line_srid():
    line = GeogLineString.create([P1, P2], srid=4269)
    decoded = codec.decode(codec.encode_to_bytes(line))
    assert all(p.srid == 4269 for p in decoded.points)


def test_line_srid_overrides_point_srid():
    line = GeogLineString.create([GeogPoint(1.0, 2.0, 3857)], srid=4326)
    assert line.points[0].srid == 4326
    unset = GeogLineString.create([GeogPoint(1.0, 2.0, 3857)])
    assert unset.points[0].srid is None


def test_points_stored_as_tuple():
    points = [P1, P2]
    line = GeogLineString.create(points)
    points.append(P3)
    assert len(line.points) == 2
    assert isinstance(line.points, tuple)


def test_big_endian_round_trip():
    line = GeogLineString.create([P1, P2, P3])
    data = codec.encode_to_bytes(line, byte_order='big')
    assert data[0] == 0
    assert codec.decode(data) == line


def test_count_exceeding_buffer_fails_before_reading():
    data = bytes([1]) + struct.pack('<II', 2, 1000) + struct.pack('<dd', 1.0, 2.0)
    with pytest.raises(DecodeError) as exc_info:
        codec.decode(data)
    assert exc_info.value.reason == 'count_overflow'
    assert exc_info.value.geometry == 'LineString'


def test_partial_coordinate_is_count_overflow():
    data = codec.encode_to_bytes(GeogLineString.create([P1, P2]))
    with pytest.raises(DecodeError) as exc_info:
        codec.decode(data[:-3])
    assert exc_info.value.reason == 'count_overflow'


@pytest.mark.parametrize('size', range(0, 9))
def test_truncated_header_or_count(size):
    data = codec.encode_to_bytes(GeogLineString.create([P1]), byte_order='little')
    with pytest.raises(DecodeError) as exc_info:
        codec.decode(data[:size])
    assert exc_info.value.reason == 'truncated'


def test_point_bytes_rejected():
    data = PointCodec().encode_to_bytes(P1)
    with pytest.raises(DecodeError) as exc_info:
        codec.decode(data)
    assert exc_info.value.reason == 'type_mismatch'


def test_trailing_bytes_rejected_when_strict():
    data = codec.encode_to_bytes(GeogLineString.create([P1])) + b'\xff'
    assert codec.decode(data) == GeogLineString.create([P1])
    with pytest.raises(DecodeError) as exc_info:
        codec.decode(data, strict=True)
    assert exc_info.value.reason == 'trailing_bytes'


def test_matches_shapely_ewkb():
    line = GeogLineString.create([P1, P2, P3], srid=4326)
    expected = shapely.to_wkb(line_string_to_shapely(line), include_srid=True, byte_order=1)
    assert codec.encode_to_bytes(line, byte_order='little') == expected


def test_decodes_shapely_ewkb():
    geom = shapely.set_srid(shapely.LineString([(0.0, 0.0), (1.0, 1.0)]), 4326)
    data = shapely.to_wkb(geom, include_srid=True, byte_order=0)
    line = codec.decode(data)
    assert line == GeogLineString.create([GeogPoint(0.0, 0.0), GeogPoint(1.0, 1.0)], srid=4326)


@pytest.mark.parametrize('line', [
    GeogLineString.create([P1, P2, P3], srid=4326),
    GeogLineString.create([P1, P2]),
    GeogLineString(),
])
def test_shapely_mapping_round_trip(line):
    assert line_string_from_shapely(line_string_to_shapely(line)) == line


def test_shapely_mapping_rejects_other_geometries():
    with pytest.raises(TypeError):
        line_string_from_shapely(shapely.Point(0, 0))


def test_out_of_range_srid_leaves_buffer_untouched():
    out = bytearray(b'\x01')
    with pytest.raises(ValueError):
        codec.encode(GeogLineString.create([P1, P2], srid=2 ** 31), out)
    assert out == bytearray(b'\x01')
