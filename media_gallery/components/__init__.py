"""Page components: upload widget, gallery view and the page shell."""

from .channel import UploadChannel
from .copy_feedback import CopyFeedback
from .gallery_view import GalleryCard, GalleryView, display_order
from .page_shell import PageShell
from .upload_widget import DragEvent, UploadWidget

__all__ = [
    "CopyFeedback",
    "DragEvent",
    "GalleryCard",
    "GalleryView",
    "PageShell",
    "UploadChannel",
    "UploadWidget",
    "display_order",
]
