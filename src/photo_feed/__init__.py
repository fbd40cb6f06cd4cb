"""OneDrive photo folder served as a social-style feed."""

__version__ = "0.1.0"
