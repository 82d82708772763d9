from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any
import enum
from mapurl.schemas.common import LatLon


def _blank_to_none(v):
    if v is None:
        return None
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _to_text(v):
    """Opaque API values may arrive as numbers from JSON."""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


class DegradationStage(str, enum.Enum):
    """Which serialization of the scene ended up in the URL."""
    LITERAL_PATHS = "literal_paths"
    ENCODED_PATHS = "encoded_paths"
    NO_PATHS = "no_paths"
    NO_MARKERS = "no_markers"


# Marker Schemas
class MarkerStyle(BaseModel):
    """Resolved visual style of a marker; markers with equal styles share one &markers= group."""
    size: Optional[str] = None
    color: Optional[str] = None
    label: Optional[str] = None
    icon: Optional[str] = None
    anchor: Optional[str] = None

    class Config:
        frozen = True


class MarkerInstance(BaseModel):
    position: LatLon
    size: Optional[str] = None
    color: Optional[str] = None
    label: Optional[str] = None
    icon: Optional[str] = None
    icon_url: Optional[str] = None  # preferred over the legacy icon field
    anchor_x: Optional[int] = None
    anchor_y: Optional[int] = None

    @field_validator("anchor_x", "anchor_y", mode="before")
    @classmethod
    def empty_anchor(cls, v):
        return _blank_to_none(v)


class MarkerSeries(BaseModel):
    markers: List[Optional[MarkerInstance]] = []

    @field_validator("markers", mode="before")
    @classmethod
    def skip_empty_markers(cls, v):
        if v is None:
            return []
        return [None if isinstance(item, dict) and not item else item for item in v]


# Path Schemas
class PathSpec(BaseModel):
    stroke_color: Optional[str] = None
    stroke_opacity: Optional[float] = Field(None, ge=0, le=1, allow_inf_nan=False)
    stroke_weight: Optional[int] = None
    is_polygon: bool = False
    fill_color: Optional[str] = None
    fill_opacity: Optional[float] = Field(None, ge=0, le=1, allow_inf_nan=False)
    vertices: List[LatLon] = []

    @field_validator("stroke_opacity", "fill_opacity", "stroke_weight", mode="before")
    @classmethod
    def empty_number(cls, v):
        return _blank_to_none(v)

    @field_validator("is_polygon", mode="before")
    @classmethod
    def parse_polygon_flag(cls, v):
        # Anything other than a case-insensitive "true" is false
        if v is None:
            return False
        if isinstance(v, bool):
            return v
        return str(v).strip().lower() == "true"

    @field_validator("vertices", mode="before")
    @classmethod
    def no_vertices(cls, v):
        return [] if v is None else v


# Scene Schemas
class Scene(BaseModel):
    center: Optional[LatLon] = None
    zoom: Optional[int] = None
    width: int = Field(..., ge=0, description="Image width in pixels")
    height: int = Field(..., ge=0, description="Image height in pixels")
    map_type: Optional[str] = None
    image_format: Optional[str] = None
    scale: Optional[str] = None
    request_params: Optional[str] = Field(None, description="Extra query parameters, already &-joined")
    markers: List[MarkerSeries] = []
    paths: List[PathSpec] = []

    @field_validator("map_type", "image_format", "scale", mode="before")
    @classmethod
    def opaque_text(cls, v):
        return _to_text(v)

    @field_validator("markers", "paths", mode="before")
    @classmethod
    def no_features(cls, v):
        return [] if v is None else v


class StaticMapUrlRequest(Scene):
    """Request to render a scene into a static map URL."""
    keep_within_max_url_length: bool = True
    max_url_length: Optional[int] = Field(None, gt=0, description="Overrides the configured limit")


class ParameterStoreUrlRequest(BaseModel):
    """Request to render a raw map element parameter map into a static map URL."""
    parameters: Dict[str, Any]
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    keep_within_max_url_length: bool = True
    max_url_length: Optional[int] = Field(None, gt=0)


class StaticMapUrlResult(BaseModel):
    """Rendered URL plus how it was fitted into the length limit."""
    url: str
    length: int
    stage: DegradationStage
    within_limit: bool
    max_url_length: int
