"""
Coordinate formatting for static map requests.

Coordinates are rounded to at most 5 decimal places (approx. 1m precision),
always toward positive infinity. Keeping the URL short matters more than
sub-metre precision.
"""
from decimal import Decimal, ROUND_CEILING

_QUANTUM = Decimal("0.00001")


def format_coordinate(value: float) -> str:
    """
    Format a latitude or longitude with up to 5 fractional digits.

    Trailing zeros are dropped, as is the decimal point of integral values.
    The integer part has no minimum width, so 0.5 renders as ".5".

    Args:
        value: Coordinate in degrees

    Returns:
        Formatted coordinate string
    """
    # Round on the shortest decimal form of the float, not its binary expansion
    rounded = Decimal(repr(float(value))).quantize(_QUANTUM, rounding=ROUND_CEILING)
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    if text.startswith("0."):
        text = text[1:]
    return sign + text


def format_lat_lon(lat: float, lon: float) -> str:
    """Format a coordinate pair as "lat,lon"."""
    return f"{format_coordinate(lat)},{format_coordinate(lon)}"
