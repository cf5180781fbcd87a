"""EWKB codec for geography column values."""
from .errors import DecodeError, SerializationDisabledError
from .models import GeogPoint, GeogLineString
from .codecs import GeographyCodec, PointCodec, LineStringCodec
from .codecs.point_codec import point_to_shapely, point_from_shapely
from .codecs.line_string_codec import line_string_to_shapely, line_string_from_shapely

__all__ = [
    'DecodeError',
    'SerializationDisabledError',
    'GeogPoint',
    'GeogLineString',
    'GeographyCodec',
    'PointCodec',
    'LineStringCodec',
    'point_to_shapely',
    'point_from_shapely',
    'line_string_to_shapely',
    'line_string_from_shapely',
]
