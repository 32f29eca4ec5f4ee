"""Domain services - Stateless operations on domain objects."""

from .boundaries import next_boundaries
from .classifier import ExpirationClassifier, classify
from .notification_gate import Alert, NotificationGate, join_names
from .tooltip import render_tooltip

__all__ = [
    "Alert",
    "ExpirationClassifier",
    "NotificationGate",
    "classify",
    "join_names",
    "next_boundaries",
    "render_tooltip",
]
