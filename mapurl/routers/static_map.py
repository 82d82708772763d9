from fastapi import APIRouter, HTTPException, status

from mapurl.core.logging_config import logger
from mapurl.schemas.static_map import ParameterStoreUrlRequest, StaticMapUrlRequest, StaticMapUrlResult
from mapurl.services.map_image import map_image_service

router = APIRouter()


@router.post("/url", response_model=StaticMapUrlResult)
def build_static_map_url(request_data: StaticMapUrlRequest):
    """
    Render a scene into a static map request URL.

    When the URL with literal path coordinates is too long, paths are
    encoded as polylines. With keep_within_max_url_length (default) paths
    and then markers are dropped until the URL fits.

    Set keep_within_max_url_length to false to find out whether the
    encoded form fits at all, e.g. before splitting data across maps.

    Example:
        ```json
        {
            "center": {"lat": 40.0, "lon": -75.0},
            "zoom": 10,
            "width": 300,
            "height": 200
        }
        ```
    """
    try:
        return map_image_service.build_url(
            scene=request_data,
            keep_within_max_url_length=request_data.keep_within_max_url_length,
            max_url_length=request_data.max_url_length
        )
    except ValueError as e:
        logger.error(f"Invalid static map scene: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.post("/url/from-parameters", response_model=StaticMapUrlResult)
def build_static_map_url_from_parameters(request_data: ParameterStoreUrlRequest):
    """
    Render a map element parameter map into a static map request URL.

    The parameter map uses the report element keys (latitude, longitude,
    zoom, mapType, mapScale, imageType, reqParams, markers, paths).
    """
    try:
        return map_image_service.build_url_from_parameters(
            parameters=request_data.parameters,
            width=request_data.width,
            height=request_data.height,
            keep_within_max_url_length=request_data.keep_within_max_url_length,
            max_url_length=request_data.max_url_length
        )
    except ValueError as e:
        logger.error(f"Invalid map element parameters: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
