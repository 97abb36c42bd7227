"""Data models for the media gallery."""

from .state import UploadStatus
from .upload import ImageFile, UploadResult

__all__ = ["ImageFile", "UploadResult", "UploadStatus"]
