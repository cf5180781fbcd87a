#!/usr/bin/env python3
"""
Geography EWKB inspection tool.
Decodes a hex EWKB column value, or encodes coordinates to hex EWKB.

Usage:
  python run.py decode --type point 0101000020E6100000...
  python run.py encode --type linestring --srid 4326 -- -122.4 37.7 -122.5 37.8
"""
import argparse
import logging
import sys
from typing import List, Optional

from config import ServerParams
from geography_codec import DecodeError, GeogLineString, GeogPoint
from geography_codec.serialization import dumps
from geography_database.adapter import from_sql, to_sql
from logging_config import setup_logging_from_config

logger = logging.getLogger(__name__)

VALUE_TYPES = {
    'point': GeogPoint,
    'linestring': GeogLineString,
}


def decode_hex(hex_value: str, value_type: type) -> str:
    """Decode a hex EWKB value and return its JSON mirror."""
    value = from_sql(hex_value, value_type)
    return dumps(value, enabled=True)


def encode_coordinates(coordinates: List[float], value_type: type, srid: Optional[int] = None) -> str:
    """Encode a flat x y x y ... list as hex EWKB."""
    if len(coordinates) % 2:
        raise ValueError("Coordinates must come in x y pairs")
    pairs = list(zip(coordinates[0::2], coordinates[1::2]))
    if value_type is GeogPoint:
        if len(pairs) != 1:
            raise ValueError("A point needs exactly one x y pair")
        value = GeogPoint.create(pairs[0][0], pairs[0][1], srid)
    else:
        value = GeogLineString.create((GeogPoint.create(x, y) for x, y in pairs), srid)
    out = bytearray()
    to_sql(value, out)
    return out.hex().upper()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect PostGIS geography EWKB values.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser("decode", help="Decode hex EWKB to JSON")
    decode_parser.add_argument("--type", choices=sorted(VALUE_TYPES), default="point")
    decode_parser.add_argument("hex_value", help="Hex-encoded EWKB value")

    encode_parser = subparsers.add_parser("encode", help="Encode coordinates to hex EWKB")
    encode_parser.add_argument("--type", choices=sorted(VALUE_TYPES), default="point")
    encode_parser.add_argument("--srid", type=int, default=None)
    encode_parser.add_argument("coordinates", nargs="+", type=float, help="x y [x y ...]")

    parser.add_argument("--metrics", action="store_true", help="Start the Prometheus metrics server")

    args = parser.parse_args(argv)
    setup_logging_from_config()

    if args.metrics:
        from metrics import start_metrics_server
        start_metrics_server(ServerParams.get_int('metrics.port', 9090))

    value_type = VALUE_TYPES[args.type]
    try:
        if args.command == "decode":
            print(decode_hex(args.hex_value, value_type))
        else:
            print(encode_coordinates(args.coordinates, value_type, args.srid))
    except (DecodeError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
