#!/usr/bin/env python3
"""
WEB BANT MEDIA gallery CLI

A command-line companion to the gallery page. Lists the images stored on the
remote media service and uploads single image files to it.

Usage:
    uv run main.py list
    uv run main.py upload path/to/image.png
"""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path

from rich.console import Console

from media_gallery.api.client import ImageApiClient
from media_gallery.api.errors import GalleryApiError
from media_gallery.components.channel import UploadChannel
from media_gallery.components.gallery_view import display_order
from media_gallery.components.upload_widget import UploadWidget
from media_gallery.config import load_settings
from media_gallery.parsers.image_collector import load_image_file
from media_gallery.reporting.tracker import ConsoleReporter

# Initialize Rich console for output
console = Console()


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse; defaults to sys.argv

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="List and upload images on the WEB BANT MEDIA service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uv run main.py list                 # Show the gallery, newest URL first
  uv run main.py upload cat.png       # Upload one image and print its URL
  uv run main.py --test               # Test API connection only
        """
    )

    _ = parser.add_argument(
        "--test",
        action="store_true",
        help="Test API connection and exit"
    )

    _ = parser.add_argument(
        "--origin",
        help="Remote service origin (default: GALLERY_API_ORIGIN or the built-in origin)"
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output for debugging"
    )

    subparsers = parser.add_subparsers(dest="command")
    _ = subparsers.add_parser("list", help="List gallery images")
    upload_parser = subparsers.add_parser("upload", help="Upload a single image")
    _ = upload_parser.add_argument("file", type=Path, help="Path to the image file")

    return parser.parse_args(argv)


def list_images(client: ImageApiClient, reporter: ConsoleReporter) -> int:
    """Print the gallery in display order.

    Returns:
        Process exit code
    """
    try:
        urls = client.list_images()
    except GalleryApiError as e:
        reporter.display_error("Failed to load images. Please try again later.", e)
        return 1

    if not urls:
        reporter.display_info("No images yet. Upload your first image to get started.")
        return 0

    reporter.display_gallery(display_order(urls))
    return 0


def upload_image(client: ImageApiClient, reporter: ConsoleReporter, file_path: Path) -> int:
    """Upload one file and print its URL.

    Returns:
        Process exit code
    """
    try:
        image = load_image_file(file_path)
    except (OSError, ValueError) as e:
        reporter.display_error(str(e))
        return 1

    widget = UploadWidget(client, UploadChannel(), reporter=reporter)

    with reporter.track_upload(image.name, image.size) as progress:
        result = widget.select_files(
            [image],
            progress_callback=progress.update,
        )

    if result is None or not result.success:
        reporter.display_error(widget.error or "Upload did not start")
        return 1

    reporter.display_success(f"Uploaded {result.file_name}")
    console.print(result.url)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the gallery CLI."""
    args = parse_arguments(argv)

    verbose_mode: bool = getattr(args, 'verbose', False)
    if verbose_mode:
        console.print("[dim]Verbose mode enabled[/dim]")

    try:
        settings = load_settings(api_origin=args.origin)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    reporter = ConsoleReporter(console)
    client = ImageApiClient(settings, reporter=reporter)

    if verbose_mode:
        console.print(f"[dim]Endpoint: {client.endpoint}[/dim]")

    # Handle test mode
    if args.test:
        console.print("[blue]Testing API connection...[/blue]")
        if client.test_connection():
            console.print("[green]✓ Connection working properly![/green]")
            sys.exit(0)
        console.print("[red]✗ Connection test failed![/red]")
        sys.exit(1)

    try:
        if args.command == "upload":
            exit_code = upload_image(client, reporter, args.file)
        else:
            exit_code = list_images(client, reporter)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user.[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[red]Critical error: {e}[/red]")
        if verbose_mode:
            console.print(f"[dim]{traceback.format_exc()}[/dim]")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
