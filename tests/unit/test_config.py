"""Settings loading tests"""
from unittest.mock import patch

import pytest

from media_gallery.config import DEFAULT_API_ORIGIN, GallerySettings, load_settings

ENV_VARS = ("GALLERY_API_ORIGIN", "GALLERY_REQUEST_TIMEOUT", "GALLERY_COPY_FEEDBACK_SECONDS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("media_gallery.config.load_dotenv"):
        yield


@pytest.mark.unit
class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings()

        assert settings.api_origin == DEFAULT_API_ORIGIN
        assert settings.request_timeout is None
        assert settings.copy_feedback_seconds == 2.0

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GALLERY_API_ORIGIN", "https://media.example")
        monkeypatch.setenv("GALLERY_REQUEST_TIMEOUT", "12.5")
        monkeypatch.setenv("GALLERY_COPY_FEEDBACK_SECONDS", "3")

        settings = load_settings()

        assert settings.api_origin == "https://media.example"
        assert settings.request_timeout == 12.5
        assert settings.copy_feedback_seconds == 3.0

    def test_explicit_origin_wins(self, monkeypatch):
        monkeypatch.setenv("GALLERY_API_ORIGIN", "https://media.example")

        assert load_settings(api_origin="https://other.example").api_origin == "https://other.example"

    @pytest.mark.parametrize("value", ["soon", "0", "-1"])
    def test_invalid_number_names_variable(self, monkeypatch, value):
        monkeypatch.setenv("GALLERY_REQUEST_TIMEOUT", value)

        with pytest.raises(ValueError, match="GALLERY_REQUEST_TIMEOUT"):
            load_settings()

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("GALLERY_REQUEST_TIMEOUT", "  ")

        assert load_settings().request_timeout is None


@pytest.mark.unit
def test_images_endpoint_strips_trailing_slash():
    settings = GallerySettings(api_origin="https://media.example/")

    assert settings.images_endpoint == "https://media.example/api/v1/uploadImg"
