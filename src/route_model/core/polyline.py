"""Encoded polyline codec (the Google "encoded polyline algorithm format").

Each coordinate is stored as a pair of signed deltas against the previous
coordinate, in fixed-point units of ``10**-precision`` degrees.  Every delta is
zig-zag mapped to an unsigned integer and written as 5-bit chunks, least
significant first, each chunk offset by 63 and flagged with 0x20 when more
chunks follow.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from route_model.core.models import Coordinate

_OFFSET = 63
_CHUNK_BITS = 5
_CHUNK_MASK = 0x1F
_CONTINUATION = 0x20


class MalformedPolyline(ValueError):
    """The encoded string is truncated or contains a character outside the alphabet."""

    def __init__(self, message: str, encoded: str, position: int) -> None:
        super().__init__(f"{message} (at index {position} of {len(encoded)})")
        self.encoded = encoded
        self.position = position


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _read_varint(encoded: str, index: int) -> Tuple[int, int]:
    """Read one zig-zag value starting at *index*; returns (signed_delta, next_index)."""
    result = 0
    shift = 0
    n = len(encoded)
    while True:
        if index >= n:
            raise MalformedPolyline("string ends inside a value", encoded, index)
        byte = ord(encoded[index]) - _OFFSET
        if byte < 0 or byte > 0x3F:
            raise MalformedPolyline(
                f"character {encoded[index]!r} is outside the polyline alphabet",
                encoded,
                index,
            )
        index += 1
        result |= (byte & _CHUNK_MASK) << shift
        shift += _CHUNK_BITS
        if not byte & _CONTINUATION:
            break

    if result & 1:
        return ~(result >> 1), index
    return result >> 1, index


def decode(encoded: Optional[str], precision: int = 5) -> Tuple[Coordinate, ...]:
    """
    Decode *encoded* into coordinates, in scan order.

    ``None`` and ``""`` yield an empty tuple.  Truncated input raises
    :class:`MalformedPolyline`; no partial result is returned.
    """
    if not encoded:
        return ()

    factor = 10 ** precision
    index, lat, lng = 0, 0, 0
    n = len(encoded)
    out: List[Coordinate] = []

    while index < n:
        d_lat, index = _read_varint(encoded, index)
        if index >= n:
            raise MalformedPolyline("latitude without a longitude", encoded, index)
        d_lng, index = _read_varint(encoded, index)

        lat += d_lat
        lng += d_lng
        out.append(Coordinate(latitude=lat / factor, longitude=lng / factor))

    return tuple(out)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def _write_varint(value: int, out: List[str]) -> None:
    v = ~(value << 1) if value < 0 else value << 1
    while v >= _CONTINUATION:
        out.append(chr((_CONTINUATION | (v & _CHUNK_MASK)) + _OFFSET))
        v >>= _CHUNK_BITS
    out.append(chr(v + _OFFSET))


def encode(coordinates: Iterable[Coordinate], precision: int = 5) -> str:
    """Encode *coordinates* with the same precision :func:`decode` expects."""
    factor = 10 ** precision
    prev_lat, prev_lng = 0, 0
    out: List[str] = []

    for c in coordinates:
        lat = int(round(c.latitude * factor))
        lng = int(round(c.longitude * factor))
        _write_varint(lat - prev_lat, out)
        _write_varint(lng - prev_lng, out)
        prev_lat, prev_lng = lat, lng

    return "".join(out)
