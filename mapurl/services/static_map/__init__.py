"""
Static map request encoding.

This package provides modular components for:
- Grouping markers by style
- Serializing paths as literal coordinates or encoded polylines
- Building the request URL within the maximum URL length
- Reading scenes from map element parameter maps
"""

from .marker_grouper import group_markers, render_markers, resolve_anchor
from .path_serializer import serialize_path, serialize_paths
from .url_builder import build_map_image_url, build_map_image_url_result
from .parameters import scene_from_parameters

__all__ = [
    "group_markers",
    "render_markers",
    "resolve_anchor",
    "serialize_path",
    "serialize_paths",
    "build_map_image_url",
    "build_map_image_url_result",
    "scene_from_parameters",
]
