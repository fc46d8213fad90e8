"""Beer catalogue HTTP service."""

__version__ = "1.0.0"
