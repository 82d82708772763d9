"""
Path serialization for static map requests.

A path is written either as literal "lat,lon" vertices or, when the URL
needs to shrink, as an encoded polyline.
"""

from typing import Iterable, Optional
from mapurl.schemas.static_map import PathSpec
from mapurl.services.static_map.marker_grouper import PIPE
from mapurl.utils.colors import BLACK, WHITE, resolve_color_hex
from mapurl.utils.coordinates import format_lat_lon
from mapurl.utils.polyline import encode_polyline

STROKE_OPAQUE = "ff"
FILL_TRANSPARENT = "00"
STROKE_ALPHA_SCALE = 255
# Fill opacity has always been scaled by 256; changing it would alter existing URLs
FILL_ALPHA_SCALE = 256


def alpha_hex(opacity: Optional[float], scale: int, default: str) -> str:
    """Opacity as an unpadded hex byte, e.g. 0.5 -> "7f" with scale 255."""
    if opacity is None:
        return default
    return format(int(scale * float(opacity)), "x")


def _style_prefix(path: PathSpec) -> str:
    parts = []
    if path.stroke_color:
        color = resolve_color_hex(path.stroke_color, BLACK)
        color += alpha_hex(path.stroke_opacity, STROKE_ALPHA_SCALE, STROKE_OPAQUE)
        parts.append(f"color:0x{color.lower()}{PIPE}")

    if path.is_polygon and path.fill_color:
        fill_color = resolve_color_hex(path.fill_color, WHITE)
        fill_color += alpha_hex(path.fill_opacity, FILL_ALPHA_SCALE, FILL_TRANSPARENT)
        parts.append(f"fillcolor:0x{fill_color.lower()}{PIPE}")

    if path.stroke_weight is not None:
        parts.append(f"weight:{int(path.stroke_weight)}{PIPE}")
    return "".join(parts)


def serialize_path(path: PathSpec, encoded: bool = False) -> str:
    """
    Serialize one path as a &path= fragment.

    Args:
        path: Path or polygon to serialize
        encoded: Use an encoded polyline instead of literal coordinates

    Returns:
        The &path= query fragment
    """
    fragment = "&path=" + _style_prefix(path)
    vertices = path.vertices
    if not vertices:
        return fragment

    if encoded:
        # Polygons are closed inside the encoding
        points = [v.as_tuple() for v in vertices]
        return fragment + "enc:" + encode_polyline(points, close=path.is_polygon)

    locations = [format_lat_lon(v.lat, v.lon) for v in vertices]
    if path.is_polygon:
        locations.append(locations[0])
    return fragment + PIPE.join(locations)


def serialize_paths(paths: Iterable[PathSpec], encoded: bool = False) -> str:
    return "".join(serialize_path(path, encoded) for path in paths or [] if path is not None)
