"""WEB BANT MEDIA gallery: upload widget and image grid over a remote image API."""

__version__ = "0.1.0"
