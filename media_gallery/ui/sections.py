"""
Page Sections

Streamlit renderers for the upload widget and the gallery view.
"""

import streamlit as st

from media_gallery.components.gallery_view import GalleryView
from media_gallery.components.upload_widget import UploadWidget
from media_gallery.models.state import UploadStatus
from media_gallery.models.upload import ImageFile
from media_gallery.ui.app import BrowserClipboard
from media_gallery.ui.config import COPY_FEEDBACK_POLL_SECONDS, GRID_COLUMNS, UPLOAD_TYPES


def render_upload_section(widget: UploadWidget):
    """
    Render the upload drop zone and upload the newly selected file.

    Args:
        widget: UploadWidget from the page shell
    """
    with st.container(border=True):
        st.subheader("☁️ Upload Media Files")
        st.caption("Drag and drop your images or click to browse your files")

        uploaded_file = st.file_uploader(
            "Drag & drop an image here or click to browse",
            type=UPLOAD_TYPES,
            accept_multiple_files=False,
            disabled=widget.disabled,
            key="image_uploader",
            help="Supported formats: JPEG, PNG, GIF, etc.",
        )

        # The picker keeps returning its file on every rerun
        if uploaded_file is not None and uploaded_file.file_id != st.session_state.last_upload_id:
            st.session_state.last_upload_id = uploaded_file.file_id
            with st.spinner("Uploading..."):
                widget.select_files([ImageFile.from_uploaded(uploaded_file)])

        if widget.status is UploadStatus.ERROR and widget.error:
            st.error(widget.error)


def _render_card(gallery: GalleryView, card):
    with st.container(border=True):
        st.image(card.url, caption=card.url)
        if card.copied:
            st.success("URL Copied!", icon="✅")
        elif st.button("📋 Copy URL", key=f"copy_{card.key}"):
            gallery.copy_url(card.url)
            st.rerun()


def render_gallery_section(gallery: GalleryView, clipboard: BrowserClipboard, polling: bool = False):
    """
    Render the gallery: error banner, spinner, grid or empty state.

    Args:
        gallery: GalleryView from the page shell
        clipboard: Browser clipboard whose queued writes are emitted here
        polling: True when this run was started by the fragment timer
    """
    # Badge cleared: rerun the whole app so the fragment is rebuilt without a timer
    if polling and not gallery.copy_feedback.copied_url:
        st.rerun()
        return

    clipboard.flush()

    if gallery.error:
        st.error(f"⚠️ {gallery.error}")

    if gallery.show_loading:
        with st.spinner("Loading your gallery..."):
            st.empty()
        return

    if gallery.show_grid:
        header, action = st.columns([5, 1])
        header.markdown(f"### Your Gallery `{gallery.count_label}`")
        if action.button("🔄 Refresh", key="refresh_gallery"):
            with st.spinner("Loading your gallery..."):
                gallery.refresh()
            st.rerun()

        columns = st.columns(GRID_COLUMNS)
        for index, card in enumerate(gallery.cards()):
            with columns[index % GRID_COLUMNS]:
                _render_card(gallery, card)

    if gallery.show_empty:
        with st.container(border=True):
            st.markdown("### 🖼️ No images yet")
            st.caption("Upload your first image to get started")
            if st.button("🔄 Refresh Gallery", key="refresh_empty"):
                with st.spinner("Loading your gallery..."):
                    gallery.refresh()
                st.rerun()


def render_gallery_fragment(gallery: GalleryView, clipboard: BrowserClipboard):
    """Render the gallery, polling while a "copied" badge needs clearing."""
    run_every = COPY_FEEDBACK_POLL_SECONDS if gallery.copy_feedback.copied_url else None
    st.fragment(render_gallery_section, run_every=run_every)(
        gallery, clipboard, polling=run_every is not None
    )
