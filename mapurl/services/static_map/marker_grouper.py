"""
Marker grouping for static map requests.

Each distinct marker style is emitted once as a &markers= parameter with
all the locations that share it, which keeps the URL short.
"""

from typing import Dict, Iterable, List, Optional
from mapurl.schemas.static_map import MarkerInstance, MarkerSeries, MarkerStyle
from mapurl.utils.coordinates import format_lat_lon

PIPE = "%7C"

# See anchor values at https://developers.google.com/maps/documentation/maps-static/start#CustomIcons
ANCHOR_TOP = "top"
ANCHOR_LEFT = "left"
ANCHOR_RIGHT = "right"
ANCHOR_CENTER = "center"
ANCHOR_TOP_LEFT = "topleft"
ANCHOR_TOP_RIGHT = "topright"
ANCHOR_BOTTOM_LEFT = "bottomleft"
ANCHOR_BOTTOM_RIGHT = "bottomright"
ANCHOR_BOTTOM = None  # the API default, so never emitted

# Columns by x (-1, 0, 1), rows top (y=1), middle (y=0), bottom (anything else)
_ANCHOR_GRID = {
    -1: (ANCHOR_TOP_LEFT, ANCHOR_LEFT, ANCHOR_BOTTOM_LEFT),
    0: (ANCHOR_TOP, ANCHOR_CENTER, ANCHOR_BOTTOM),
    1: (ANCHOR_TOP_RIGHT, ANCHOR_RIGHT, ANCHOR_BOTTOM_RIGHT),
}


def resolve_anchor(x: Optional[int], y: Optional[int]) -> Optional[str]:
    """
    Translate icon anchor offsets into an anchor name.

        -1, 1    0, 1    1, 1  =>  topleft       top        topright
        -1, 0    0, 0    1, 0  =>  left          center     right
        -1,-1    0,-1    1,-1  =>  bottomleft    (default)  bottomright

    Args:
        x: Horizontal offset, -1 (left) to 1 (right)
        y: Vertical offset, -1 (bottom) to 1 (top)

    Returns:
        Anchor name, or None when the default bottom anchor applies
    """
    if x is None or y is None:
        return None
    column = _ANCHOR_GRID.get(x)
    if column is None:
        return None
    if y == 1:
        return column[0]
    if y == 0:
        return column[1]
    return column[2]


def resolve_style(marker: MarkerInstance) -> MarkerStyle:
    return MarkerStyle(
        size=marker.size,
        color=marker.color,
        label=marker.label,
        icon=marker.icon_url if marker.icon_url is not None else marker.icon,
        anchor=resolve_anchor(marker.anchor_x, marker.anchor_y),
    )


def flatten_marker_series(series: Iterable[MarkerSeries]) -> List[MarkerInstance]:
    """All markers of all series in order, without empty entries."""
    markers = []
    for single_series in series or []:
        if single_series is None:
            continue
        markers.extend(m for m in single_series.markers if m is not None)
    return markers


def group_markers(series: Iterable[MarkerSeries]) -> Dict[MarkerStyle, List[str]]:
    """
    Group formatted marker locations by style.

    Groups keep the order in which their style first appears.

    Args:
        series: Marker series of the scene

    Returns:
        Mapping of style to "lat,lon" strings
    """
    groups: Dict[MarkerStyle, List[str]] = {}
    for marker in flatten_marker_series(series):
        style = resolve_style(marker)
        groups.setdefault(style, []).append(
            format_lat_lon(marker.position.lat, marker.position.lon)
        )
    return groups


def label_character(label: str) -> str:
    """First character of a label, uppercased when that keeps it one character."""
    first = label[0]
    upper = first.upper()
    # "ß".upper() is "SS"; labels are a single character
    return upper if len(upper) == 1 else first


def render_marker_group(style: MarkerStyle, locations: List[str]) -> str:
    parts = ["&markers="]
    if style.anchor:
        parts.append(f"anchor:{style.anchor}{PIPE}")
    if style.size:
        parts.append(f"size:{style.size}{PIPE}")
    if style.color:
        parts.append(f"color:0x{style.color}{PIPE}")
    if style.label:
        parts.append(f"label:{label_character(style.label)}{PIPE}")
    if style.icon:
        parts.append(f"icon:{style.icon}{PIPE}")
    parts.append(PIPE.join(locations))
    return "".join(parts)


def render_markers(series: Iterable[MarkerSeries]) -> str:
    """Render every marker group as a &markers= fragment."""
    return "".join(
        render_marker_group(style, locations)
        for style, locations in group_markers(series).items()
    )
