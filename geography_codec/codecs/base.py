"""Codec base class shared by all geography value codecs."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from config import ServerParams

from ..errors import DecodeError
from ..ewkb_reader import EwkbReader


@dataclass(frozen=True)
class SqlTypeTag:
    """Semantic SQL type tag that value codecs are registered against."""
    name: str


GEOGRAPHY = SqlTypeTag("Geography")


class GeographyCodec(ABC):
    """Decodes and encodes one geography value type to and from EWKB."""

    sql_type: SqlTypeTag = GEOGRAPHY
    value_type: type = object
    geometry_name: str = ""

    @abstractmethod
    def decode(self, data: bytes, strict: Optional[bool] = None) -> Any:
        """Decode one value from ``data``."""

    @abstractmethod
    def encode(self, value: Any, out: bytearray, byte_order: Optional[str] = None) -> None:
        """Append the encoding of ``value`` to ``out``."""

    def encode_to_bytes(self, value: Any, byte_order: Optional[str] = None) -> bytes:
        """Encode ``value`` into a new bytes object."""
        out = bytearray()
        self.encode(value, out, byte_order)
        return bytes(out)

    @staticmethod
    def _byte_order(byte_order: Optional[str]) -> str:
        if byte_order is None:
            return ServerParams.get_str('codec.byte_order', 'little')
        return byte_order

    def _check_consumed(self, reader: EwkbReader, strict: Optional[bool]) -> None:
        if strict is None:
            strict = ServerParams.get_bool('codec.require_exact_length', False)
        if strict and reader.remaining:
            raise DecodeError(
                f"{reader.remaining} unexpected trailing bytes after {self.geometry_name}",
                reason="trailing_bytes",
                geometry=self.geometry_name,
            )
