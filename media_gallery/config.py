"""Environment-driven settings for the gallery."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_ORIGIN = "https://multi-media-server.naimurrhman.com"
DEFAULT_COPY_FEEDBACK_SECONDS = 2.0


@dataclass(frozen=True)
class GallerySettings:
    """Settings shared by the page, the gallery and the CLI."""

    api_origin: str = DEFAULT_API_ORIGIN
    request_timeout: float | None = None
    copy_feedback_seconds: float = DEFAULT_COPY_FEEDBACK_SECONDS

    @property
    def images_endpoint(self) -> str:
        """Listing and upload endpoint of the remote service."""
        return f"{self.api_origin.rstrip('/')}/api/v1/uploadImg"


def _read_float(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(api_origin: str | None = None) -> GallerySettings:
    """Load settings from the environment and an optional .env file.

    Args:
        api_origin: Explicit origin overriding GALLERY_API_ORIGIN

    Returns:
        GallerySettings built from the environment

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    _ = load_dotenv()

    origin = api_origin or os.getenv("GALLERY_API_ORIGIN") or DEFAULT_API_ORIGIN
    copy_seconds = _read_float(
        "GALLERY_COPY_FEEDBACK_SECONDS", DEFAULT_COPY_FEEDBACK_SECONDS
    )

    return GallerySettings(
        api_origin=origin,
        request_timeout=_read_float("GALLERY_REQUEST_TIMEOUT", None),
        copy_feedback_seconds=copy_seconds or DEFAULT_COPY_FEEDBACK_SECONDS,
    )
