"""In-memory book registry API."""

__version__ = "1.0.0"
