"""Console reporting with Rich tables and progress bars."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import final

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table


@final
class ConsoleReporter:
    """Writes gallery failures, notices and progress to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the reporter.

        Args:
            console: Rich console instance. If None, creates a new one.
        """
        self.console = console or Console()

    @contextmanager
    def track_upload(self, file_name: str, total_bytes: int) -> Iterator[UploadProgressContext]:
        """Context manager for tracking the bytes sent for one upload.

        Args:
            file_name: Name of the file being uploaded
            total_bytes: Expected size in bytes; updates may correct it

        Yields:
            Context for reporting bytes read by the encoder
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeElapsedColumn(),
            console=self.console,
        ) as progress:
            task_id = progress.add_task(f"Uploading {file_name}...", total=total_bytes)
            yield UploadProgressContext(progress, task_id)

    def display_gallery(self, urls: Sequence[str]) -> None:
        """Display gallery URLs as a table, in the order given.

        Args:
            urls: Image URLs, already in display order
        """
        noun = "image" if len(urls) == 1 else "images"
        table = Table(title=f"Your Gallery ({len(urls)} {noun})")
        table.add_column("#", style="cyan", justify="right")
        table.add_column("URL", style="green")

        for index, url in enumerate(urls, start=1):
            table.add_row(str(index), url)

        self.console.print(table)

    def display_error(self, message: str, exception: Exception | None = None) -> None:
        """Display an error message with optional exception details.

        Args:
            message: Error message to display
            exception: Optional exception for additional context
        """
        self.console.print(f"[red]Error: {message}[/red]")
        if exception:
            self.console.print(f"[dim]Details: {exception}[/dim]")

    def display_warning(self, message: str) -> None:
        """Display a warning message."""
        self.console.print(f"[yellow]Warning: {message}[/yellow]")

    def display_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(f"[green]Success: {message}[/green]")

    def display_info(self, message: str) -> None:
        """Display an info message."""
        self.console.print(f"[blue]Info: {message}[/blue]")


@final
class UploadProgressContext:
    """Context for tracking upload byte progress."""

    def __init__(self, progress: Progress, task_id: TaskID) -> None:
        """Initialize the context.

        Args:
            progress: Rich Progress instance
            task_id: Task ID for the progress bar
        """
        self.progress = progress
        self.task_id = task_id

    def update(self, bytes_read: int, total_bytes: int | None = None) -> None:
        """Set the number of bytes sent so far.

        Args:
            bytes_read: Total bytes read by the multipart encoder
            total_bytes: Length of the whole multipart body, if known
        """
        self.progress.update(self.task_id, completed=bytes_read, total=total_bytes)
