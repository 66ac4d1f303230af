"""Base class for notification channels."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from alertbridge.exceptions import DeliveryError
from alertbridge.models.alert import Alert
from alertbridge.models.delivery import DeliveryResult, GroupOutcome

logger = logging.getLogger(__name__)


class BaseChannel(ABC):
    """Abstract base class for notification channels."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Channel name for logging."""
        ...

    @abstractmethod
    async def send(self, status: str, alerts: Sequence[Alert]) -> DeliveryResult:
        """Render one status group and deliver it to the channel."""
        ...

    async def send_safe(self, status: str, alerts: Sequence[Alert]) -> GroupOutcome:
        """Send one status group, recording delivery errors in the outcome."""
        try:
            result = await self.send(status, alerts)
        except DeliveryError as e:
            logger.exception(f"Failed to send '{status}' group to channel {self.name}: {e}")
            return GroupOutcome(status=status, alert_count=len(alerts), error=str(e))
        return GroupOutcome(status=status, alert_count=len(alerts), result=result)
