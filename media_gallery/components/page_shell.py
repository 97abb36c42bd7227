"""Page composition: initial fetch, upload widget and gallery."""

from __future__ import annotations

from typing import final

from media_gallery.api.client import ImageApiClient, get_images
from media_gallery.components.channel import UploadChannel
from media_gallery.components.copy_feedback import CopyFeedback, Scheduler
from media_gallery.components.gallery_view import ClipboardWriter, GalleryView
from media_gallery.components.upload_widget import UploadWidget
from media_gallery.reporting.tracker import ConsoleReporter

PAGE_TITLE = "WEB BANT MEDIA"


@final
class PageShell:
    """Owns the upload channel and the two sibling components."""

    def __init__(
        self,
        gallery: GalleryView,
        upload_widget: UploadWidget,
        channel: UploadChannel,
    ) -> None:
        self.title = PAGE_TITLE
        self.gallery = gallery
        self.upload_widget = upload_widget
        self.channel = channel

    @classmethod
    def load(
        cls,
        client: ImageApiClient,
        clipboard: ClipboardWriter,
        reporter: ConsoleReporter | None = None,
        schedule: Scheduler | None = None,
    ) -> PageShell:
        """Fetch the gallery once and mount the page components.

        Args:
            client: Shared API client
            clipboard: Writes a URL to the system clipboard
            reporter: Where failures are logged
            schedule: Timer scheduler for the copied indicator

        Returns:
            A mounted PageShell
        """
        reporter = reporter or ConsoleReporter()
        images = get_images(client, reporter)

        channel = UploadChannel()
        gallery = GalleryView(
            images,
            client,
            channel,
            clipboard,
            reporter=reporter,
            copy_feedback=CopyFeedback(
                duration=client.settings.copy_feedback_seconds, schedule=schedule
            ),
        )
        upload_widget = UploadWidget(client, channel, reporter=reporter)

        shell = cls(gallery, upload_widget, channel)
        shell.mount()
        return shell

    def mount(self) -> None:
        self.gallery.mount()

    def unmount(self) -> None:
        """Tear down both components."""
        self.upload_widget.unmount()
        self.gallery.unmount()
