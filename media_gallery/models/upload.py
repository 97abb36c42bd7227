"""Upload data models."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class UploadedFileLike(Protocol):
    """Minimal interface of a browser-provided file (e.g. Streamlit UploadedFile)."""

    name: str
    type: str

    def getvalue(self) -> bytes: ...


@dataclass(frozen=True)
class ImageFile:
    """A single file handed to the upload widget."""

    name: str
    content: bytes
    mime_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: Path) -> ImageFile:
        """Read an image file from disk.

        Args:
            path: Path to the image file

        Returns:
            ImageFile with the file's bytes and guessed MIME type

        Raises:
            OSError: If the file cannot be read
        """
        mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return cls(name=path.name, content=path.read_bytes(), mime_type=mime_type)

    @classmethod
    def from_uploaded(cls, uploaded: UploadedFileLike) -> ImageFile:
        """Wrap a browser-provided file object."""
        mime_type = (
            uploaded.type
            or mimetypes.guess_type(uploaded.name)[0]
            or "application/octet-stream"
        )
        return cls(name=uploaded.name, content=uploaded.getvalue(), mime_type=mime_type)

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class UploadResult:
    """Result of a single image upload."""

    success: bool
    url: str | None
    file_name: str
    error_message: str | None = None
