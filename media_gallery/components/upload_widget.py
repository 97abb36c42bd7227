"""Single-file upload widget with drag-and-drop handling."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Callable, final

from media_gallery.api.client import ImageApiClient
from media_gallery.components.channel import UploadChannel
from media_gallery.models.state import UploadStatus
from media_gallery.models.upload import ImageFile, UploadResult
from media_gallery.reporting.tracker import ConsoleReporter

UPLOAD_ERROR_MESSAGE = "Failed to upload image. Please try again later."

DRAG_ACTIVATE_EVENTS = ("dragenter", "dragover")
DRAG_DEACTIVATE_EVENTS = ("dragleave",)


@dataclass
class DragEvent:
    """A drag or drop event delivered to the drop zone."""

    type: str
    files: list[ImageFile] = field(default_factory=list)
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@final
class UploadWidget:
    """Uploads one file at a time and announces the stored URL.

    State moves idle -> uploading -> idle on success, or uploading -> error on
    failure. The error stays visible until a later upload succeeds.
    """

    def __init__(
        self,
        client: ImageApiClient,
        channel: UploadChannel,
        reporter: ConsoleReporter | None = None,
    ) -> None:
        """Initialize the widget.

        Args:
            client: Shared API client
            channel: Channel the new URL is published on
            reporter: Where upload failures are logged
        """
        self.client = client
        self.channel = channel
        self.reporter = reporter or ConsoleReporter()

        self.status: UploadStatus = UploadStatus.IDLE
        self.error: str | None = None
        self.drag_active = False
        self._mounted = True

    @property
    def uploading(self) -> bool:
        return self.status is UploadStatus.UPLOADING

    @property
    def disabled(self) -> bool:
        """Whether the file input refuses new selections."""
        return self.uploading

    def handle_drag(self, event: DragEvent) -> None:
        """Track drag enter/over/leave on the drop zone.

        Args:
            event: Drag event; its default browser action is always suppressed
        """
        event.prevent_default()
        event.stop_propagation()

        if event.type in DRAG_ACTIVATE_EVENTS:
            self.drag_active = True
        elif event.type in DRAG_DEACTIVATE_EVENTS:
            self.drag_active = False

    def handle_drop(self, event: DragEvent) -> UploadResult | None:
        """Upload the first dropped file.

        Args:
            event: Drop event; the browser's file-open navigation is suppressed

        Returns:
            Result of the upload, or None if nothing was uploaded
        """
        event.prevent_default()
        event.stop_propagation()
        self.drag_active = False

        if not event.files:
            return None
        return self.select_files(event.files)

    def select_files(
        self,
        files: Sequence[ImageFile],
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> UploadResult | None:
        """Upload the first of the selected files.

        Only one file is uploaded per attempt, even if several were selected.
        Selections made while an upload is running are ignored.

        Args:
            files: Files from the picker or a drop
            progress_callback: Callback(bytes_read, total_bytes)

        Returns:
            Result of the upload, or None if the selection was ignored
        """
        if not files or self.disabled:
            return None

        image = files[0]
        self.status = UploadStatus.UPLOADING

        try:
            url = self.client.upload_image(image, progress_callback=progress_callback)
        except Exception as e:
            self.reporter.display_error(f"Error uploading image {image.name}", e)
            if self._mounted:
                self.error = UPLOAD_ERROR_MESSAGE
                self.status = UploadStatus.ERROR
            return UploadResult(
                success=False,
                url=None,
                file_name=image.name,
                error_message=str(e),
            )

        if self._mounted:
            self.error = None
            self.status = UploadStatus.IDLE
            self.channel.publish(url)
        return UploadResult(success=True, url=url, file_name=image.name)

    def unmount(self) -> None:
        """Detach the widget; in-flight results no longer update it."""
        self._mounted = False
