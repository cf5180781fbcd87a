"""
asyncpg type codec for PostGIS geography.

PostGIS sends and receives geography in binary format as EWKB, so the
adapter can be installed directly as a binary codec on a connection.
"""
import logging
from typing import Type

import asyncpg

from geography_codec.models.geog_point import GeogPoint

from .adapter import GEOGRAPHY, codec_for, from_sql, to_sql

logger = logging.getLogger(__name__)


async def register_geography_codec(connection: asyncpg.Connection, value_type: Type = GeogPoint, schema: str = 'public') -> None:
    """
    Decode ``geography`` columns on ``connection`` as ``value_type``.

    Args:
        connection: asyncpg connection (or pool connection)
        value_type: GeogPoint or GeogLineString
        schema: Schema the PostGIS extension is installed in
    """
    codec = codec_for(value_type)

    def encoder(value) -> bytes:
        out = bytearray()
        to_sql(value, out)
        return bytes(out)

    def decoder(data: bytes):
        return from_sql(data, value_type)

    await connection.set_type_codec(
        'geography',
        schema=schema,
        encoder=encoder,
        decoder=decoder,
        format='binary',
    )
    logger.info(f"Registered asyncpg {GEOGRAPHY.name} codec for {codec.geometry_name} in schema {schema}")
