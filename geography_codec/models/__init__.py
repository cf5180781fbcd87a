"""Geography value models."""
from .geog_point import GeogPoint
from .geog_line_string import GeogLineString

__all__ = ['GeogPoint', 'GeogLineString']
