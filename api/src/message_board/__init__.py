"""Public government message board API."""

__version__ = "1.0.0"
