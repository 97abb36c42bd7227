"""Local image file utilities."""

from .image_collector import SUPPORTED_IMAGE_EXTENSIONS, load_image_file

__all__ = ["SUPPORTED_IMAGE_EXTENSIONS", "load_image_file"]
