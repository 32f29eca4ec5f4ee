"""File system adapter."""

from .change_source import WatchfilesChangeSource

__all__ = ["WatchfilesChangeSource"]
