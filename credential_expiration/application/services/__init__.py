"""Application services."""

from .event_scheduler import EventScheduler

__all__ = ["EventScheduler"]
