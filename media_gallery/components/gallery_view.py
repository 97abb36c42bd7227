"""Gallery grid state: refresh, upload notifications and click-to-copy."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Callable, final

from media_gallery.api.client import ImageApiClient
from media_gallery.components.channel import UploadChannel
from media_gallery.components.copy_feedback import CopyFeedback
from media_gallery.reporting.tracker import ConsoleReporter

LOAD_ERROR_MESSAGE = "Failed to load images. Please try again later."

ClipboardWriter = Callable[[str], None]


def display_order(urls: Iterable[str]) -> list[str]:
    """Order URLs for display: ascending string sort, then reversed.

    Duplicates are kept.

    Args:
        urls: Gallery URLs in stored order

    Returns:
        New list in descending lexical order
    """
    ordered = sorted(urls)
    ordered.reverse()
    return ordered


def count_label(count: int) -> str:
    return f"{count} {'image' if count == 1 else 'images'}"


@dataclass(frozen=True)
class GalleryCard:
    """One rendered card of the grid."""

    key: str
    url: str
    copied: bool


@final
class GalleryView:
    """Holds the gallery collection and the view's transient status."""

    def __init__(
        self,
        initial_images: Sequence[str],
        client: ImageApiClient,
        channel: UploadChannel,
        clipboard: ClipboardWriter,
        reporter: ConsoleReporter | None = None,
        copy_feedback: CopyFeedback | None = None,
    ) -> None:
        """Initialize the view.

        Args:
            initial_images: URLs fetched before the first render
            client: Shared API client used by refresh
            channel: Channel announcing uploaded URLs
            clipboard: Writes a URL to the system clipboard
            reporter: Where refresh and copy failures are logged
            copy_feedback: Copied indicator; defaults to a 2 second window
        """
        self.images: list[str] = list(initial_images)
        self.client = client
        self.channel = channel
        self.clipboard = clipboard
        self.reporter = reporter or ConsoleReporter()
        self.copy_feedback = copy_feedback or CopyFeedback()

        self.loading = False
        self.error: str | None = None
        self._mounted = False
        self._disposed = False

    # Lifecycle

    def mount(self) -> None:
        """Start listening for uploaded URLs."""
        if self._disposed or self._mounted:
            return
        self.channel.subscribe(self._on_image_uploaded)
        self._mounted = True

    def unmount(self) -> None:
        """Stop listening and ignore results that arrive afterwards."""
        self.channel.unsubscribe(self._on_image_uploaded)
        self.copy_feedback.dispose()
        self._mounted = False
        self._disposed = True

    @property
    def mounted(self) -> bool:
        return self._mounted

    def _on_image_uploaded(self, url: str) -> None:
        if self._disposed:
            return
        self.images.append(url)

    # Operations

    def refresh(self) -> bool:
        """Replace the collection with a fresh listing.

        Returns:
            True if the listing succeeded
        """
        if self._disposed:
            return False

        self.loading = True
        try:
            images = self.client.list_images()
        except Exception as e:
            self.reporter.display_error("Error fetching images", e)
            if not self._disposed:
                self.error = LOAD_ERROR_MESSAGE
            return False
        else:
            if not self._disposed:
                self.images = images
                self.error = None
            return True
        finally:
            self.loading = False

    def copy_url(self, url: str) -> bool:
        """Copy url to the clipboard and show the copied indicator.

        Copy failures are logged only.

        Args:
            url: URL of the clicked card

        Returns:
            True if the clipboard write succeeded
        """
        try:
            self.clipboard(url)
        except Exception as e:
            self.reporter.display_error("Failed to copy URL", e)
            return False

        if not self._disposed:
            self.copy_feedback.mark(url)
        return True

    # Rendering helpers

    def is_copied(self, url: str) -> bool:
        return self.copy_feedback.is_copied(url)

    @property
    def show_loading(self) -> bool:
        return self.loading

    @property
    def show_grid(self) -> bool:
        return not self.loading and len(self.images) > 0

    @property
    def show_empty(self) -> bool:
        return not self.loading and len(self.images) == 0

    @property
    def count_label(self) -> str:
        return count_label(len(self.images))

    def cards(self) -> list[GalleryCard]:
        """Cards in display order.

        Keys combine the URL with its occurrence number, so duplicate URLs
        still get distinct keys.
        """
        seen: dict[str, int] = {}
        cards: list[GalleryCard] = []
        for url in display_order(self.images):
            occurrence = seen.get(url, 0)
            seen[url] = occurrence + 1
            cards.append(
                GalleryCard(key=f"{url}#{occurrence}", url=url, copied=self.is_copied(url))
            )
        return cards
