"""
UI Configuration Constants

Page settings and display text used by the Streamlit page.
"""

from media_gallery.components.page_shell import PAGE_TITLE
from media_gallery.parsers.image_collector import SUPPORTED_IMAGE_EXTENSIONS

PAGE_CONFIG = {
    'page_title': PAGE_TITLE,
    'page_icon': '🖼️',
    'layout': 'wide',
    'initial_sidebar_state': 'collapsed',
}

GRID_COLUMNS = 4

UPLOAD_TYPES = sorted(ext.lstrip('.') for ext in SUPPORTED_IMAGE_EXTENSIONS)

# Polling interval for the gallery fragment while a "copied" badge is visible
COPY_FEEDBACK_POLL_SECONDS = 0.5
