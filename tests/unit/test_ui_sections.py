"""Streamlit section renderer and browser clipboard tests"""
from unittest.mock import Mock, patch

import pytest

from media_gallery.components.channel import UploadChannel
from media_gallery.components.copy_feedback import CopyFeedback
from media_gallery.components.gallery_view import GalleryView
from media_gallery.ui.app import BrowserClipboard
from media_gallery.ui.sections import render_gallery_section


@pytest.fixture
def gallery(mock_client, reporter, scheduler):
    return GalleryView(
        ["https://x/a.png"],
        mock_client,
        UploadChannel(),
        Mock(),
        reporter=reporter,
        copy_feedback=CopyFeedback(schedule=scheduler),
    )


@pytest.mark.unit
class TestBrowserClipboard:

    def test_flush_writes_each_queued_url(self):
        clipboard = BrowserClipboard()
        clipboard('https://x/a.png?name="quoted"')
        clipboard("https://x/b.png")

        with patch("media_gallery.ui.app.st") as mock_st:
            clipboard.flush()

        assert clipboard.pending == []
        snippets = [call.args[0] for call in mock_st.html.call_args_list]
        assert len(snippets) == 2
        assert 'writeText("https://x/a.png?name=\\"quoted\\"")' in snippets[0]
        assert 'writeText("https://x/b.png")' in snippets[1]
        for call in mock_st.html.call_args_list:
            assert call.kwargs["unsafe_allow_javascript"] is True

    def test_flush_with_empty_queue_renders_nothing(self):
        with patch("media_gallery.ui.app.st") as mock_st:
            BrowserClipboard().flush()

        mock_st.html.assert_not_called()


@pytest.mark.unit
class TestGallerySectionPolling:

    def test_timer_run_after_badge_cleared_reruns_app(self, gallery):
        clipboard = Mock(spec=BrowserClipboard)

        with patch("media_gallery.ui.sections.st") as mock_st:
            render_gallery_section(gallery, clipboard, polling=True)

        mock_st.rerun.assert_called_once()
        clipboard.flush.assert_not_called()
        mock_st.columns.assert_not_called()

    def test_timer_run_while_badge_shown_renders(self, gallery):
        clipboard = Mock(spec=BrowserClipboard)
        gallery.copy_feedback.mark("https://x/a.png")
        gallery.loading = True

        with patch("media_gallery.ui.sections.st") as mock_st:
            render_gallery_section(gallery, clipboard, polling=True)

        mock_st.rerun.assert_not_called()
        clipboard.flush.assert_called_once()
        mock_st.spinner.assert_called_once_with("Loading your gallery...")
