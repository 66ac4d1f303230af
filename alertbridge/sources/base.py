"""Base class for notification source parsers."""

from abc import ABC, abstractmethod
from typing import Any

from alertbridge.models.alert import Notification


class BaseSource(ABC):
    """Abstract base class for notification source parsers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name identifier."""
        ...

    @abstractmethod
    def parse(self, payload: dict[str, Any]) -> Notification:
        """Parse an already-loaded JSON payload into a Notification."""
        ...

    @abstractmethod
    def decode(self, raw: bytes) -> Notification:
        """Parse a raw request body into a Notification."""
        ...
