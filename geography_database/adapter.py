"""
Type-mapping adapter for the Geography column type.

Associates each geography value type with the codec that reads and writes it,
and routes raw column values through that codec. The codec is always chosen
from the caller's expected value type, never by inspecting the bytes.
"""
import binascii
import enum
import logging
from typing import Any, Dict, Optional, Tuple, Type, Union

from config import ServerParams
from geography_codec.codecs.base import GEOGRAPHY, GeographyCodec, SqlTypeTag
from geography_codec.codecs.line_string_codec import LineStringCodec
from geography_codec.codecs.point_codec import PointCodec
from geography_codec.errors import DecodeError

import metrics

logger = logging.getLogger(__name__)

RawValue = Union[bytes, bytearray, memoryview, str]


class IsNull(enum.Enum):
    """Whether a written value is SQL NULL."""
    YES = "yes"
    NO = "no"


def _build_registry() -> Dict[SqlTypeTag, Dict[type, GeographyCodec]]:
    registry: Dict[SqlTypeTag, Dict[type, GeographyCodec]] = {}
    for codec in (PointCodec(), LineStringCodec()):
        registry.setdefault(codec.sql_type, {})[codec.value_type] = codec
    return registry


# Built once; never modified afterwards
_REGISTRY: Dict[SqlTypeTag, Dict[type, GeographyCodec]] = _build_registry()


def registered_types(tag: SqlTypeTag = GEOGRAPHY) -> Tuple[type, ...]:
    """Value types whose codecs are registered against ``tag``."""
    return tuple(_REGISTRY.get(tag, {}))


def codec_for(value_type: Type, tag: SqlTypeTag = GEOGRAPHY) -> GeographyCodec:
    """
    Get the codec registered against ``tag`` for a value type.

    Raises:
        TypeError: If ``value_type`` is not mapped to ``tag``
    """
    try:
        return _REGISTRY[tag][value_type]
    except KeyError:
        raise TypeError(
            f"{getattr(value_type, '__name__', value_type)!s} is not mapped to SQL type {tag.name}"
        ) from None


def _metrics_enabled() -> bool:
    return ServerParams.get_bool('metrics.enabled', True)


def _as_bytes(raw: RawValue, geometry: str) -> bytes:
    if isinstance(raw, str):
        # PostGIS text output is hex-encoded EWKB
        try:
            return binascii.unhexlify(raw)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"Invalid hex EWKB: {e}", reason="hex", geometry=geometry) from e
    return bytes(raw)


def from_sql(raw: Optional[RawValue], value_type: Type) -> Any:
    """
    Decode a raw Geography column value into ``value_type``.

    Args:
        raw: Column bytes (or hex text); None for SQL NULL
        value_type: Expected value type (GeogPoint or GeogLineString)

    Returns:
        Decoded value, or None for SQL NULL

    Raises:
        DecodeError: If the column value is malformed
        TypeError: If ``value_type`` is not mapped to Geography
    """
    codec = codec_for(value_type)
    if raw is None:
        return None

    try:
        value = codec.decode(_as_bytes(raw, codec.geometry_name))
    except DecodeError as e:
        logger.warning(
            f"Failed to decode {GEOGRAPHY.name} value as {codec.geometry_name}: "
            f"{e} (reason={e.reason})"
        )
        if _metrics_enabled():
            metrics.record_decode_failure(codec.geometry_name, e.reason)
        raise

    logger.debug(f"Decoded {GEOGRAPHY.name} value as {codec.geometry_name}")
    if _metrics_enabled():
        metrics.record_decoded(codec.geometry_name)
    return value


def to_sql(value: Any, out: bytearray) -> IsNull:
    """
    Encode ``value`` for a Geography column, appending the bytes to ``out``.

    Returns:
        IsNull.NO for every geography value, IsNull.YES for None (nothing written)

    Raises:
        TypeError: If the value's type is not mapped to Geography
    """
    if value is None:
        return IsNull.YES

    codec = codec_for(type(value))
    codec.encode(value, out)

    logger.debug(f"Encoded {codec.geometry_name} for {GEOGRAPHY.name} column")
    if _metrics_enabled():
        metrics.record_encoded(codec.geometry_name)
    return IsNull.NO
