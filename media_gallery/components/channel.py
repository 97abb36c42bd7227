"""Upload notifications passed from the upload widget to the gallery."""

from __future__ import annotations

from typing import Callable, final

UploadListener = Callable[[str], None]


@final
class UploadChannel:
    """Explicit publish/subscribe channel for newly uploaded image URLs.

    The page shell owns one channel and hands it to both the upload widget
    and the gallery view, so neither depends on global state.
    """

    def __init__(self) -> None:
        self._listeners: list[UploadListener] = []

    def subscribe(self, listener: UploadListener) -> None:
        """Register a listener for uploaded URLs.

        Args:
            listener: Called with each published URL
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: UploadListener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, url: str) -> None:
        """Announce a newly uploaded URL to every listener.

        Args:
            url: URL returned by the remote service
        """
        for listener in list(self._listeners):
            listener(url)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
