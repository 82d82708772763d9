"""
Static map URL builder.

Builds the request URL for a scene and keeps it under the configured
maximum length by degrading it in a fixed order:

1) literal path coordinates
2) encoded polylines for paths
3) no paths
4) no markers
"""

from typing import Optional, Tuple
from mapurl.core.config import settings
from mapurl.core.logging_config import logger
from mapurl.schemas.static_map import DegradationStage, Scene, StaticMapUrlResult
from mapurl.services.static_map.marker_grouper import render_markers
from mapurl.services.static_map.path_serializer import serialize_paths

# Hide the POI markers by default
STYLE_DEFAULT = "&style=feature:poi%7Cvisibility:off"

# Zooms of 30 and above make no sense to the map API, so they select a style
# preset instead when no center is given.
ZOOM_STYLE_THRESHOLD = 30

# Natural features and attractions, transport icons hidden
ZOOM_STYLE_ENVIRONMENT = 30
STYLE_ENVIRONMENT = (
    "&style=feature:poi%7Cvisibility:off"
    "&style=feature:poi.attraction%7Cvisibility:on"
    "&style=feature:poi.park%7Cvisibility:on"
    "&style=feature:transit%7Celement:labels.icon%7Cvisibility:off"
)

# Natural features, transport icons hidden
ZOOM_STYLE_FLOOD = 31
STYLE_FLOOD = (
    "&style=feature:poi%7Cvisibility:off"
    "&style=feature:poi.park%7Cvisibility:on"
    "&style=feature:transit%7Celement:labels.icon%7Cvisibility:off"
)

ZOOM_STYLES = {
    ZOOM_STYLE_ENVIRONMENT: STYLE_ENVIRONMENT,
    ZOOM_STYLE_FLOOD: STYLE_FLOOD,
}

# Coordinates this close to 0 on both axes mean "no center supplied"
CENTER_EPSILON = 0.0001


def style_for_zoom(zoom: int) -> Optional[str]:
    """Style preset selected by a zoom in the upper register, if any."""
    if zoom < ZOOM_STYLE_THRESHOLD:
        return None
    return ZOOM_STYLES.get(zoom)


def has_center(lat: float, lon: float) -> bool:
    return abs(lat) > CENTER_EPSILON and abs(lon) > CENTER_EPSILON


def build_base_url(scene: Scene) -> str:
    """
    Base URL with center, zoom, size, map options and styles.

    Args:
        scene: Scene to render

    Returns:
        URL up to and including the style parameters
    """
    lat = scene.center.lat if scene.center is not None else settings.DEFAULT_LATITUDE
    lon = scene.center.lon if scene.center is not None else settings.DEFAULT_LONGITUDE
    zoom = scene.zoom if scene.zoom is not None else settings.DEFAULT_ZOOM

    url = settings.STATIC_MAP_BASE_URL
    styles = STYLE_DEFAULT

    if has_center(lat, lon):
        url += f"center={float(lat)},{float(lon)}&zoom={zoom}&"
    else:
        # Without a center the API fits the view to the markers and paths
        styles = style_for_zoom(zoom) or STYLE_DEFAULT

    url += f"size={scene.width}x{scene.height}"
    if scene.map_type is not None:
        url += f"&maptype={scene.map_type}"
    if scene.image_format is not None:
        url += f"&format={scene.image_format}"
    if scene.scale is not None:
        url += f"&scale={scene.scale}"
    return url + styles


def build_request_params(scene: Scene) -> str:
    if scene.request_params is None or not scene.request_params.strip():
        return ""
    return "&" + scene.request_params


def _fit(
    base: str,
    markers: str,
    literal_paths: str,
    params: str,
    scene: Scene,
    keep_within_max_url_length: bool,
    max_url_length: int,
) -> Tuple[DegradationStage, str]:
    url = base + markers + literal_paths + params
    if len(url) < max_url_length:
        return DegradationStage.LITERAL_PATHS, url

    logger.debug(
        f"Static map URL length {len(url)} reaches limit {max_url_length}, "
        f"encoding paths as polylines"
    )
    encoded_paths = serialize_paths(scene.paths, encoded=True)
    url = base + markers + encoded_paths + params

    if not keep_within_max_url_length:
        # Lets callers check whether all the data fits, e.g. to split it across maps
        return DegradationStage.ENCODED_PATHS, url

    if len(url) < max_url_length:
        return DegradationStage.ENCODED_PATHS, url

    url = base + markers + params
    if len(url) < max_url_length:
        logger.warning(f"Static map URL too long with encoded paths, dropping {len(scene.paths)} paths")
        return DegradationStage.NO_PATHS, url

    logger.warning(
        f"Static map URL too long without paths, dropping paths and markers "
        f"(limit {max_url_length})"
    )
    return DegradationStage.NO_MARKERS, base + params


def build_map_image_url_result(
    scene: Scene,
    keep_within_max_url_length: bool = True,
    max_url_length: Optional[int] = None,
) -> StaticMapUrlResult:
    """
    Build the static map URL and report which degradation stage was used.

    Args:
        scene: Scene to render
        keep_within_max_url_length: Drop paths, then markers, when encoded
            paths still do not fit. When False the encoded form is returned
            even if it is too long.
        max_url_length: Length limit, defaults to settings.MAX_URL_LENGTH

    Returns:
        StaticMapUrlResult with the URL, its length and the stage
    """
    limit = max_url_length if max_url_length is not None else settings.MAX_URL_LENGTH

    base = build_base_url(scene)
    markers = render_markers(scene.markers)
    literal_paths = serialize_paths(scene.paths)
    params = build_request_params(scene)

    stage, url = _fit(base, markers, literal_paths, params, scene, keep_within_max_url_length, limit)
    logger.debug(f"Static map URL built: stage={stage.value}, length={len(url)}")

    return StaticMapUrlResult(
        url=url,
        length=len(url),
        stage=stage,
        within_limit=len(url) < limit,
        max_url_length=limit,
    )


def build_map_image_url(
    scene: Scene,
    keep_within_max_url_length: bool = True,
    max_url_length: Optional[int] = None,
) -> str:
    """Build the static map URL for a scene. See build_map_image_url_result."""
    return build_map_image_url_result(scene, keep_within_max_url_length, max_url_length).url
