"""AWS credential expiration monitor."""

__version__ = "1.0.0"
