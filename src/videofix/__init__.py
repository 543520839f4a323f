"""videofix - check media files against a format policy and fix them."""

__version__ = "0.1.0"
