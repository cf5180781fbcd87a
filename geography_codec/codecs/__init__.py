"""Geography value codecs."""
from .base import GEOGRAPHY, GeographyCodec, SqlTypeTag
from .point_codec import PointCodec
from .line_string_codec import LineStringCodec

__all__ = ['GEOGRAPHY', 'SqlTypeTag', 'GeographyCodec', 'PointCodec', 'LineStringCodec']
