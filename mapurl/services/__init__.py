from .map_image import map_image_service

__all__ = ["map_image_service"]
