"""
SQLAlchemy column type for PostGIS geography columns.
Rows are selected as EWKB bytes and bound parameters are sent as EWKB, both
routed through the Geography adapter.
"""
from typing import Optional, Type

from sqlalchemy.sql import func
from sqlalchemy.types import UserDefinedType

from geography_codec.models.geog_line_string import GeogLineString
from geography_codec.models.geog_point import GeogPoint

from .adapter import codec_for, from_sql, to_sql

_COLUMN_SUBTYPES = {
    GeogPoint: 'POINT',
    GeogLineString: 'LINESTRING',
}


class Geography(UserDefinedType):
    """PostGIS Geography type decoding to ``value_type``."""

    cache_ok = True

    def __init__(self, value_type: Type = GeogPoint, srid: Optional[int] = None):
        # Fails early for types with no codec
        codec_for(value_type)
        self.value_type = value_type
        self.srid = srid

    def get_col_spec(self, **kw):
        subtype = _COLUMN_SUBTYPES[self.value_type]
        if self.srid is None:
            return f'GEOGRAPHY({subtype})'
        return f'GEOGRAPHY({subtype},{self.srid})'

    def bind_processor(self, dialect):
        """Convert from Python type to database type."""
        def process(value):
            if value is None:
                return None
            out = bytearray()
            to_sql(value, out)
            return bytes(out)
        return process

    def bind_expression(self, bindvalue):
        return func.ST_GeogFromWKB(bindvalue, type_=self)

    def column_expression(self, colexpr):
        # ST_AsBinary(geography) drops the SRID; go through geometry for EWKB
        return func.ST_AsEWKB(func.geometry(colexpr), type_=self)

    def result_processor(self, dialect, coltype):
        """Convert from database type to Python type."""
        def process(value):
            return from_sql(value, self.value_type)
        return process
