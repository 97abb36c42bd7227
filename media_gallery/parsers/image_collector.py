"""Image file loading for command-line uploads."""

from __future__ import annotations

from pathlib import Path

from media_gallery.models.upload import ImageFile

# Supported image file extensions
SUPPORTED_IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp', '.tiff'}


def load_image_file(file_path: Path) -> ImageFile:
    """
    Load a single image file for upload.

    Args:
        file_path: Path to the image file

    Returns:
        ImageFile: The file's name, bytes and MIME type

    Raises:
        FileNotFoundError: If the path does not exist or is not a file
        ValueError: If the extension is not a supported image format
    """
    if not file_path.exists() or not file_path.is_file():
        raise FileNotFoundError(f"File does not exist or is not a file: {file_path}")

    if file_path.suffix.lower() not in SUPPORTED_IMAGE_EXTENSIONS:
        supported = ", ".join(sorted(SUPPORTED_IMAGE_EXTENSIONS))
        raise ValueError(f"Unsupported image format '{file_path.suffix}' (supported: {supported})")

    return ImageFile.from_path(file_path)
