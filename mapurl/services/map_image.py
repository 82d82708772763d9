from typing import Any, Dict, Optional
from mapurl.core.logging_config import logger
from mapurl.schemas.static_map import Scene, StaticMapUrlResult
from mapurl.services.static_map import build_map_image_url_result, scene_from_parameters


class MapImageService:
    """
    Service layer for static map URL requests.

    Coordinates scene construction and URL building for the API layer.
    """

    def build_url(
        self,
        scene: Scene,
        keep_within_max_url_length: bool = True,
        max_url_length: Optional[int] = None
    ) -> StaticMapUrlResult:
        """
        Build the static map URL for a scene.

        Args:
            scene: Scene to render
            keep_within_max_url_length: Drop paths and markers to fit the limit
            max_url_length: Optional override of the configured limit

        Returns:
            StaticMapUrlResult with the URL and the stage used
        """
        result = build_map_image_url_result(
            scene,
            keep_within_max_url_length=keep_within_max_url_length,
            max_url_length=max_url_length
        )
        if not result.within_limit:
            logger.warning(
                f"Static map URL exceeds limit: length={result.length}, "
                f"limit={result.max_url_length}, stage={result.stage.value}"
            )
        return result

    def build_url_from_parameters(
        self,
        parameters: Dict[str, Any],
        width: int,
        height: int,
        keep_within_max_url_length: bool = True,
        max_url_length: Optional[int] = None
    ) -> StaticMapUrlResult:
        """
        Build the static map URL from a map element's parameter map.

        Raises:
            ValueError: If the parameter map holds malformed numeric styles
        """
        scene = scene_from_parameters(parameters, width, height)
        return self.build_url(scene, keep_within_max_url_length, max_url_length)


map_image_service = MapImageService()
