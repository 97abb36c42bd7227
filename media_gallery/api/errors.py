"""Failures raised by the image API client."""

from __future__ import annotations


class GalleryApiError(Exception):
    """Base class for remote image API failures."""
    pass


class FetchFailure(GalleryApiError):
    """Listing request returned a non-success HTTP status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Failed to fetch images: {status_code}")
        self.status_code = status_code


class UploadFailure(GalleryApiError):
    """Upload request returned a non-success HTTP status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Failed to upload image: {status_code}")
        self.status_code = status_code


class TransportFailure(GalleryApiError):
    """The remote service could not be reached or the request timed out."""
    pass


class ParseFailure(GalleryApiError):
    """The response body was not the JSON shape the service promises."""
    pass
