"""
Scene construction from a map element's raw parameter map.

Report map elements carry their settings as a flat parameter map with
marker series and path lists nested inside. This module turns that map
into a validated Scene.
"""

from typing import Any, Dict, List, Mapping, Optional
from mapurl.core.logging_config import logger
from mapurl.schemas.common import LatLon
from mapurl.schemas.static_map import MarkerInstance, MarkerSeries, PathSpec, Scene

PARAMETER_LATITUDE = "latitude"
PARAMETER_LONGITUDE = "longitude"
PARAMETER_ZOOM = "zoom"
PARAMETER_MAP_TYPE = "mapType"
PARAMETER_MAP_SCALE = "mapScale"
PARAMETER_IMAGE_TYPE = "imageType"
PARAMETER_REQ_PARAMS = "reqParams"
PARAMETER_MARKERS = "markers"
PARAMETER_PATHS = "paths"
PARAMETER_PATH_LOCATIONS = "locations"

MARKER_SIZE = "size"
MARKER_COLOR = "color"
MARKER_LABEL = "label"
MARKER_ICON = "icon"
MARKER_ICON_URL = "icon.url"
MARKER_ICON_ANCHOR_X = "icon.anchor.x"
MARKER_ICON_ANCHOR_Y = "icon.anchor.y"

STYLE_STROKE_COLOR = "strokeColor"
STYLE_STROKE_OPACITY = "strokeOpacity"
STYLE_STROKE_WEIGHT = "strokeWeight"
STYLE_IS_POLYGON = "isPolygon"
STYLE_FILL_COLOR = "fillColor"
STYLE_FILL_OPACITY = "fillOpacity"


def _location(item: Mapping[str, Any]) -> LatLon:
    return LatLon(lat=item.get(PARAMETER_LATITUDE), lon=item.get(PARAMETER_LONGITUDE))


def _center(parameters: Mapping[str, Any]) -> Optional[LatLon]:
    lat = parameters.get(PARAMETER_LATITUDE)
    lon = parameters.get(PARAMETER_LONGITUDE)
    if lat is None and lon is None:
        return None
    return LatLon(lat=lat if lat is not None else 0.0, lon=lon if lon is not None else 0.0)


def marker_from_parameters(item: Mapping[str, Any]) -> MarkerInstance:
    return MarkerInstance(
        position=_location(item),
        size=item.get(MARKER_SIZE),
        color=item.get(MARKER_COLOR),
        label=item.get(MARKER_LABEL),
        icon=item.get(MARKER_ICON),
        icon_url=item.get(MARKER_ICON_URL),
        anchor_x=item.get(MARKER_ICON_ANCHOR_X),
        anchor_y=item.get(MARKER_ICON_ANCHOR_Y),
    )


def marker_series_from_parameters(marker_series: Optional[Mapping[str, Any]]) -> List[MarkerSeries]:
    """
    Convert the marker series mapping (series name -> series config).

    Only series configs holding a "markers" list contribute; null or empty
    marker maps are skipped.
    """
    series = []
    if not marker_series:
        return series

    for name, config in marker_series.items():
        if not config or PARAMETER_MARKERS not in config:
            logger.debug(f"Marker series '{name}' has no markers, skipping")
            continue
        markers = [
            marker_from_parameters(item)
            for item in config.get(PARAMETER_MARKERS) or []
            if item
        ]
        series.append(MarkerSeries(markers=markers))
    return series


def path_from_parameters(item: Mapping[str, Any]) -> PathSpec:
    locations = item.get(PARAMETER_PATH_LOCATIONS) or []
    return PathSpec(
        stroke_color=item.get(STYLE_STROKE_COLOR),
        stroke_opacity=item.get(STYLE_STROKE_OPACITY),
        stroke_weight=item.get(STYLE_STROKE_WEIGHT),
        is_polygon=item.get(STYLE_IS_POLYGON),
        fill_color=item.get(STYLE_FILL_COLOR),
        fill_opacity=item.get(STYLE_FILL_OPACITY),
        vertices=[_location(location) for location in locations if location],
    )


def paths_from_parameters(path_list: Optional[List[Mapping[str, Any]]]) -> List[PathSpec]:
    return [path_from_parameters(item) for item in path_list or [] if item]


def scene_from_parameters(parameters: Dict[str, Any], width: int, height: int) -> Scene:
    """
    Build a Scene from a map element's parameter map.

    Args:
        parameters: Raw parameter map of the map element
        width: Element width in pixels
        height: Element height in pixels

    Returns:
        Validated Scene

    Raises:
        ValueError: If a numeric style value (weight, opacity, anchor) is malformed
    """
    return Scene(
        center=_center(parameters),
        zoom=parameters.get(PARAMETER_ZOOM),
        width=width,
        height=height,
        map_type=parameters.get(PARAMETER_MAP_TYPE),
        image_format=parameters.get(PARAMETER_IMAGE_TYPE),
        scale=parameters.get(PARAMETER_MAP_SCALE),
        request_params=parameters.get(PARAMETER_REQ_PARAMS),
        markers=marker_series_from_parameters(parameters.get(PARAMETER_MARKERS)),
        paths=paths_from_parameters(parameters.get(PARAMETER_PATHS)),
    )
