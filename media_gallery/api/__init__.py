"""Remote image API client."""

from .client import ImageApiClient, get_images
from .errors import (
    FetchFailure,
    GalleryApiError,
    ParseFailure,
    TransportFailure,
    UploadFailure,
)

__all__ = [
    "FetchFailure",
    "GalleryApiError",
    "ImageApiClient",
    "ParseFailure",
    "TransportFailure",
    "UploadFailure",
    "get_images",
]
