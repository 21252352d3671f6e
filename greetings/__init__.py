"""Location-aware greeting web service."""

__version__ = "1.0.0"
