"""
Streamlit UI Application

Builds the page shell once per browser session and keeps it in session state.
"""

import json

import streamlit as st

from media_gallery.api.client import ImageApiClient
from media_gallery.components.page_shell import PageShell
from media_gallery.config import load_settings
from media_gallery.reporting.tracker import ConsoleReporter


class BrowserClipboard:
    """Queues URLs to be written to the browser clipboard on the next render."""

    def __init__(self):
        self.pending: list[str] = []

    def __call__(self, url: str) -> None:
        self.pending.append(url)

    def flush(self) -> None:
        """Emit the clipboard writes queued since the last render."""
        while self.pending:
            url = self.pending.pop(0)
            st.html(
                "<script>"
                f"navigator.clipboard.writeText({json.dumps(url)})"
                ".catch((err) => console.error('Failed to copy URL: ', err));"
                "</script>",
                unsafe_allow_javascript=True,
            )


def init_session_state():
    """Create the page shell the first time this session renders."""
    if 'clipboard' not in st.session_state:
        st.session_state.clipboard = BrowserClipboard()

    if 'page' not in st.session_state:
        reporter = ConsoleReporter()
        st.session_state.page = PageShell.load(
            ImageApiClient(load_settings(), reporter=reporter),
            st.session_state.clipboard,
            reporter=reporter,
        )

    # file_id of the last picker selection that was uploaded
    if 'last_upload_id' not in st.session_state:
        st.session_state.last_upload_id = None
