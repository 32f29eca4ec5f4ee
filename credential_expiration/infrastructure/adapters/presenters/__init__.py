"""Presenter adapters.

The tray presenter is imported on demand since pystray needs a desktop
session to load.
"""

from .icons import create_icon_image
from .log_presenter import LogPresenter

__all__ = [
    "LogPresenter",
    "create_icon_image",
]
