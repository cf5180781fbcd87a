"""Database-facing bindings for geography column values."""
from .adapter import GEOGRAPHY, IsNull, SqlTypeTag, codec_for, from_sql, to_sql, registered_types
from .sql_types import Geography
from .asyncpg_codec import register_geography_codec

__all__ = [
    'GEOGRAPHY',
    'IsNull',
    'SqlTypeTag',
    'codec_for',
    'from_sql',
    'to_sql',
    'registered_types',
    'Geography',
    'register_geography_codec',
]
