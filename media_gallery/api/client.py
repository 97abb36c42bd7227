"""Client for the remote image storage API."""

from __future__ import annotations

import io
from typing import Any, Callable

import requests
from requests.exceptions import HTTPError, RequestException
from requests_toolbelt.multipart.encoder import MultipartEncoder, MultipartEncoderMonitor

from media_gallery.api.errors import (
    FetchFailure,
    ParseFailure,
    TransportFailure,
    UploadFailure,
)
from media_gallery.config import GallerySettings, load_settings
from media_gallery.models.upload import ImageFile
from media_gallery.reporting.tracker import ConsoleReporter

UPLOAD_FIELD_NAME = "image"

NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


class ImageApiClient:
    """Lists and stores images on the remote service.

    Every caller that talks to the service (page load, gallery refresh, the
    upload widget and the CLI) goes through this class.
    """

    def __init__(
        self,
        settings: GallerySettings | None = None,
        reporter: ConsoleReporter | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Gallery settings. If None, loads them from the environment.
            reporter: Where connection test failures are logged
        """
        self.settings = settings or load_settings()
        self.reporter = reporter or ConsoleReporter()
        self.endpoint: str = self.settings.images_endpoint
        self.timeout: float | None = self.settings.request_timeout

    def _make_request(
        self,
        method: str,
        data: Any = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Make an API request against the images endpoint.

        Args:
            method: HTTP method
            data: Request body (a MultipartEncoder(Monitor) for uploads)
            headers: Additional headers

        Returns:
            Response object with a success status

        Raises:
            requests.exceptions.HTTPError: If the service answers with a non-2xx status
            TransportFailure: If the request could not be completed
        """
        request_headers: dict[str, str] = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)

        # The encoder knows the multipart boundary
        if hasattr(data, "content_type"):
            request_headers["Content-Type"] = data.content_type

        try:
            response = requests.request(
                method,
                self.endpoint,
                data=data,
                headers=request_headers,
                timeout=self.timeout,
            )
        except RequestException as e:
            raise TransportFailure(f"{method} {self.endpoint} failed: {e}") from e

        response.raise_for_status()
        return response

    @staticmethod
    def _read_data(response: requests.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as e:
            raise ParseFailure(f"Response is not valid JSON: {e}") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise ParseFailure("Response has no 'data' object")
        return data

    def list_images(self) -> list[str]:
        """Fetch the current image URLs, bypassing any cache.

        Returns:
            Image URLs in the order the service returned them

        Raises:
            FetchFailure: If the service answers with a non-success status
            TransportFailure: If the service cannot be reached
            ParseFailure: If the body is not shaped {data: {urls: [...]}}
        """
        try:
            response = self._make_request("GET", headers=NO_CACHE_HEADERS)
        except HTTPError as e:
            raise FetchFailure(e.response.status_code) from e

        urls = self._read_data(response).get("urls")
        if not isinstance(urls, list) or not all(isinstance(url, str) for url in urls):
            raise ParseFailure("Response 'data.urls' is not a list of strings")
        return list(urls)

    def upload_image(
        self,
        image: ImageFile,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> str:
        """Upload a single image.

        Args:
            image: The file to upload
            progress_callback: Callback(bytes_read, total_bytes)

        Returns:
            URL of the stored image

        Raises:
            UploadFailure: If the service answers with a non-success status
            TransportFailure: If the service cannot be reached
            ParseFailure: If the body is not shaped {data: {url: ...}}
        """
        encoder = MultipartEncoder(
            fields={
                UPLOAD_FIELD_NAME: (image.name, io.BytesIO(image.content), image.mime_type)
            }
        )

        if progress_callback:
            total_bytes = encoder.len
            data: Any = MultipartEncoderMonitor(
                encoder,
                lambda monitor: progress_callback(monitor.bytes_read, total_bytes),
            )
        else:
            data = encoder

        try:
            response = self._make_request("POST", data=data)
        except HTTPError as e:
            raise UploadFailure(e.response.status_code) from e

        url = self._read_data(response).get("url")
        if not isinstance(url, str) or not url:
            raise ParseFailure("Response 'data.url' is missing")
        return url

    def test_connection(self) -> bool:
        """Test that the listing endpoint answers.

        Returns:
            True if a listing request succeeded
        """
        try:
            self.list_images()
            return True
        except Exception as e:
            self.reporter.display_error("API connection test failed", e)
            return False


def get_images(
    client: ImageApiClient | None = None,
    reporter: ConsoleReporter | None = None,
) -> list[str]:
    """Fetch image URLs for the first page render.

    Failures are logged and degrade to an empty gallery; nothing is raised.

    Args:
        client: API client. If None, one is built from the environment.
        reporter: Where failures are logged

    Returns:
        Image URLs, or an empty list if the listing failed
    """
    reporter = reporter or ConsoleReporter()
    try:
        client = client or ImageApiClient()
        return client.list_images()
    except Exception as e:
        reporter.display_error("Error fetching images", e)
        return []
