import pytest
from prometheus_client import REGISTRY

from geography_codec import DecodeError, GeogLineString, GeogPoint, LineStringCodec, PointCodec
from geography_codec.codecs import GeographyCodec, SqlTypeTag
from geography_database.adapter import GEOGRAPHY, IsNull, codec_for, from_sql, registered_types, to_sql


POINT = GeogPoint(-122.4194, 37.7749, 4326)
LINE = GeogLineString.create([GeogPoint(0.0, 0.0), GeogPoint(1.0, 1.0)], srid=4326)


def _sample(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_single_geography_tag_maps_both_types():
    assert GEOGRAPHY.name == 'Geography'
    assert registered_types() == (GeogPoint, GeogLineString)
    assert isinstance(codec_for(GeogPoint), PointCodec)
    assert isinstance(codec_for(GeogLineString), LineStringCodec)


def test_codecs_declare_geography_tag():
    assert GeographyCodec.sql_type is GEOGRAPHY
    assert PointCodec().sql_type is GEOGRAPHY
    assert LineStringCodec().sql_type is GEOGRAPHY


def test_registry_grouped_by_declared_tag():
    other = SqlTypeTag('Geometry')
    assert registered_types(other) == ()
    with pytest.raises(TypeError):
        codec_for(GeogPoint, other)


def test_unmapped_type_raises_type_error():
    with pytest.raises(TypeError):
        codec_for(dict)
    with pytest.raises(TypeError):
        to_sql({'x': 1}, bytearray())


def test_to_sql_reports_not_null_and_appends():
    out = bytearray(b'\x00')
    assert to_sql(POINT, out) is IsNull.NO
    assert bytes(out[1:]) == PointCodec().encode_to_bytes(POINT)


def test_to_sql_none_is_null():
    out = bytearray()
    assert to_sql(None, out) is IsNull.YES
    assert out == bytearray()


@pytest.mark.parametrize('value', [POINT, LINE])
def test_round_trip_through_adapter(value):
    out = bytearray()
    to_sql(value, out)
    assert from_sql(bytes(out), type(value)) == value


@pytest.mark.parametrize('wrap', [bytes, bytearray, memoryview])
def test_from_sql_accepts_buffer_types(wrap):
    data = PointCodec().encode_to_bytes(POINT)
    assert from_sql(wrap(data), GeogPoint) == POINT


def test_from_sql_accepts_hex_text():
    data = LineStringCodec().encode_to_bytes(LINE)
    assert from_sql(data.hex().upper(), GeogLineString) == LINE


def test_from_sql_invalid_hex():
    with pytest.raises(DecodeError) as exc_info:
        from_sql('not-hex', GeogPoint)
    assert exc_info.value.reason == 'hex'


def test_from_sql_null():
    assert from_sql(None, GeogPoint) is None


def test_codec_chosen_by_expected_type():
    data = PointCodec().encode_to_bytes(POINT)
    with pytest.raises(DecodeError) as exc_info:
        from_sql(data, GeogLineString)
    assert exc_info.value.reason == 'type_mismatch'


def test_decode_failure_counted():
    labels = {'geometry': 'Point', 'reason': 'truncated'}
    before = _sample('geography_decode_failures_total', labels)
    with pytest.raises(DecodeError):
        from_sql(b'\x01\x01\x00', GeogPoint)
    assert _sample('geography_decode_failures_total', labels) == before + 1


def test_decode_and_encode_counted():
    decoded_before = _sample('geography_values_decoded_total', {'geometry': 'LineString'})
    encoded_before = _sample('geography_values_encoded_total', {'geometry': 'LineString'})
    out = bytearray()
    to_sql(LINE, out)
    from_sql(bytes(out), GeogLineString)
    assert _sample('geography_values_decoded_total', {'geometry': 'LineString'}) == decoded_before + 1
    assert _sample('geography_values_encoded_total', {'geometry': 'LineString'}) == encoded_before + 1


def test_metrics_can_be_disabled(config_override):
    config_override(metrics={'enabled': False})
    labels = {'geometry': 'Point'}
    before = _sample('geography_values_encoded_total', labels)
    to_sql(POINT, bytearray())
    assert _sample('geography_values_encoded_total', labels) == before
