"""Base alert sink with common functionality."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ....domain.services import Alert


class BaseAlertSink(ABC):
    """Abstract base class for alert sinks."""

    def __init__(self) -> None:
        """Initialize the alert sink."""
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def push(self, alert: Alert) -> None:
        """Deliver the given alert."""
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the sink is properly configured."""
        ...
