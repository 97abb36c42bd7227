"""Streamlit front-end for the media gallery."""
