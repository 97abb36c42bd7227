"""Console reporting for gallery operations."""

from .tracker import ConsoleReporter, UploadProgressContext

__all__ = ["ConsoleReporter", "UploadProgressContext"]
