"""
Polyline encoding utility.
Implements the Encoded Polyline Algorithm Format.
ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm
"""
import math
from typing import List, Sequence, Tuple

PRECISION = 1e5


def encode_polyline(points: Sequence[Tuple[float, float]], close: bool = False) -> str:
    """
    Encode a list of (lat, lon) tuples into a polyline string.

    Args:
        points: List of (latitude, longitude) tuples.
        close: Append the first point after the last one, producing a closed ring.

    Returns:
        Encoded polyline string.
    """
    points = list(points)
    if close and points:
        points.append(points[0])

    result = []
    prev_lat = 0
    prev_lon = 0

    for lat, lon in points:
        lat_e5 = _scale(lat)
        lon_e5 = _scale(lon)

        d_lat = lat_e5 - prev_lat
        d_lon = lon_e5 - prev_lon

        prev_lat = lat_e5
        prev_lon = lon_e5

        result.append(_encode_value(d_lat))
        result.append(_encode_value(d_lon))

    return "".join(result)


def decode_polyline(encoded: str) -> List[Tuple[float, float]]:
    """
    Decode a polyline string back into (lat, lon) tuples.

    Args:
        encoded: Encoded polyline string.

    Returns:
        List of (latitude, longitude) tuples at 1e-5 precision.

    Raises:
        ValueError: If the string is truncated or contains invalid characters
    """
    values = []
    index = 0
    while index < len(encoded):
        value, index = _decode_value(encoded, index)
        values.append(value)

    if len(values) % 2:
        raise ValueError("Polyline has an unpaired coordinate")

    points = []
    lat = 0
    lon = 0
    for i in range(0, len(values), 2):
        lat += values[i]
        lon += values[i + 1]
        points.append((lat / PRECISION, lon / PRECISION))
    return points


def _scale(value: float) -> int:
    # Halves round toward positive infinity
    return int(math.floor(value * PRECISION + 0.5))


def _encode_value(value: int) -> str:
    """Encode a single value."""
    value = value << 1
    if value < 0:
        value = ~value

    result = []
    while value >= 0x20:
        result.append(chr((0x20 | (value & 0x1f)) + 63))
        value >>= 5
    result.append(chr(value + 63))

    return "".join(result)


def _decode_value(encoded: str, index: int) -> Tuple[int, int]:
    """Decode a single value starting at index; returns (value, next index)."""
    result = 0
    shift = 0
    while True:
        if index >= len(encoded):
            raise ValueError("Polyline ends in the middle of a value")
        chunk = ord(encoded[index]) - 63
        index += 1
        if chunk < 0 or chunk > 0x3f:
            raise ValueError(f"Invalid polyline character {encoded[index - 1]!r} at position {index - 1}")
        result |= (chunk & 0x1f) << shift
        shift += 5
        if chunk < 0x20:
            break

    if result & 1:
        return ~(result >> 1), index
    return result >> 1, index
