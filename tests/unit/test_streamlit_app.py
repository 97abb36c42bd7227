"""Streamlit page smoke tests"""
from pathlib import Path
from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from tests.helpers import make_response

APP_PATH = str(Path(__file__).resolve().parents[2] / "streamlit_app.py")
REQUEST = "media_gallery.api.client.requests.request"

LISTING = {"data": {"urls": ["https://x/a.png", "https://x/c.png", "https://x/b.png"]}}


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch("media_gallery.config.load_dotenv"):
        yield


def markdown_text(app):
    return "\n".join(element.value for element in app.markdown)


@pytest.mark.unit
class TestGalleryPage:

    def test_renders_grid_with_count(self):
        with patch(REQUEST, return_value=make_response(200, LISTING)):
            app = AppTest.from_file(APP_PATH).run()

        assert not app.exception
        assert "WEB BANT MEDIA" in markdown_text(app)
        assert "Your Gallery `3 images`" in markdown_text(app)
        assert app.button(key="copy_https://x/c.png#0") is not None

    def test_failed_listing_shows_empty_state(self):
        with patch(REQUEST, return_value=make_response(500, text="boom")):
            app = AppTest.from_file(APP_PATH).run()

        assert not app.exception
        assert "No images yet" in markdown_text(app)
        assert not app.error

    def test_copy_shows_feedback(self, monkeypatch):
        monkeypatch.setenv("GALLERY_COPY_FEEDBACK_SECONDS", "60")
        with patch(REQUEST, return_value=make_response(200, LISTING)):
            app = AppTest.from_file(APP_PATH).run()
            app.button(key="copy_https://x/b.png#0").click().run()

        assert not app.exception
        assert [element.value for element in app.success] == ["URL Copied!"]
