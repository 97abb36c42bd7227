"""Pytest fixtures shared by all tests"""
from unittest.mock import Mock

import pytest
from rich.console import Console

from media_gallery.api.client import ImageApiClient
from media_gallery.config import GallerySettings
from media_gallery.models.upload import ImageFile
from media_gallery.reporting.tracker import ConsoleReporter
from tests.helpers import TEST_ORIGIN, ManualScheduler


@pytest.fixture
def settings():
    return GallerySettings(api_origin=TEST_ORIGIN)


@pytest.fixture
def client(settings, reporter):
    return ImageApiClient(settings, reporter=reporter)


@pytest.fixture
def mock_client(settings):
    """ImageApiClient stand-in with no network access"""
    mock = Mock(spec=ImageApiClient)
    mock.settings = settings
    mock.list_images.return_value = []
    return mock


@pytest.fixture
def console():
    return Console(record=True, width=200)


@pytest.fixture
def reporter(console):
    return ConsoleReporter(console)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def png_file():
    return ImageFile(name="d.png", content=b"\x89PNG fake", mime_type="image/png")
