"""Transient "URL copied" indicator."""

from __future__ import annotations

import threading
from typing import Any, Callable, final

from media_gallery.config import DEFAULT_COPY_FEEDBACK_SECONDS

Scheduler = Callable[[float, Callable[[], None]], Any]


def thread_timer(delay: float, callback: Callable[[], None]) -> threading.Timer:
    """Run callback once after delay seconds on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


@final
class CopyFeedback:
    """Remembers which URL was copied last, for a fixed window.

    Each copy bumps a generation counter and arms a one-shot timer carrying
    that generation. A timer only clears the indicator if no later copy has
    happened since it was armed.
    """

    def __init__(
        self,
        duration: float = DEFAULT_COPY_FEEDBACK_SECONDS,
        schedule: Scheduler | None = None,
    ) -> None:
        """Initialize the indicator.

        Args:
            duration: Seconds the indicator stays on after a copy
            schedule: Scheduler(delay, callback); defaults to a threading.Timer
        """
        self.duration = duration
        self._schedule = schedule or thread_timer
        self._lock = threading.Lock()
        self._copied_url: str | None = None
        self._generation = 0
        self._disposed = False

    @property
    def copied_url(self) -> str | None:
        with self._lock:
            return self._copied_url

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def mark(self, url: str) -> int:
        """Mark url as just copied and arm its clear timer.

        Args:
            url: The URL written to the clipboard

        Returns:
            Generation assigned to this copy
        """
        with self._lock:
            if self._disposed:
                return self._generation
            self._generation += 1
            generation = self._generation
            self._copied_url = url

        self._schedule(self.duration, lambda: self.expire(generation))
        return generation

    def expire(self, generation: int) -> bool:
        """Clear the indicator if generation is still the latest copy.

        Args:
            generation: Generation the firing timer was armed with

        Returns:
            True if the indicator was cleared
        """
        with self._lock:
            if self._disposed or generation != self._generation:
                return False
            self._copied_url = None
            return True

    def is_copied(self, url: str) -> bool:
        return self.copied_url == url

    def dispose(self) -> None:
        """Stop reacting to pending timers."""
        with self._lock:
            self._disposed = True
            self._copied_url = None
