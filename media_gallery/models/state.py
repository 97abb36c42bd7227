"""UI status models."""

from enum import Enum


class UploadStatus(Enum):
    """Upload widget state."""
    IDLE = "idle"
    UPLOADING = "uploading"
    ERROR = "error"
