"""
WEB BANT MEDIA Streamlit UI - Main Entry Point

Usage:
    streamlit run streamlit_app.py
"""

import streamlit as st

from media_gallery.ui.app import init_session_state
from media_gallery.ui.config import PAGE_CONFIG
from media_gallery.ui.sections import render_gallery_fragment, render_upload_section

st.set_page_config(**PAGE_CONFIG)

init_session_state()

page = st.session_state.page

st.markdown(
    f"<h1 style='text-align: center;'>{page.title}</h1>",
    unsafe_allow_html=True,
)

render_upload_section(page.upload_widget)

st.markdown("---")

render_gallery_fragment(page.gallery, st.session_state.clipboard)
