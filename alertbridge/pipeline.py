"""Notification pipeline: decode, group by status, deliver each group."""

import logging

from alertbridge.channels.base import BaseChannel
from alertbridge.channels.discord import DiscordChannel
from alertbridge.config import Settings
from alertbridge.grouping import group_by_status
from alertbridge.models.alert import Notification
from alertbridge.models.delivery import PipelineReport
from alertbridge.sources.alertmanager import AlertmanagerSource
from alertbridge.sources.base import BaseSource

logger = logging.getLogger(__name__)


class NotificationPipeline:
    """Turns one inbound notification into one channel message per status.

    The pipeline holds no per-request state, so a single instance can
    serve concurrent requests.
    """

    def __init__(self, source: BaseSource, channel: BaseChannel):
        self._source = source
        self._channel = channel

    @classmethod
    def from_settings(cls, settings: Settings) -> "NotificationPipeline":
        channel = DiscordChannel(
            webhook_url=settings.require_webhook_url(),
            timeout=settings.delivery_timeout,
        )
        return cls(AlertmanagerSource(), channel)

    @property
    def source(self) -> BaseSource:
        return self._source

    @property
    def channel(self) -> BaseChannel:
        return self._channel

    async def handle(self, raw: bytes) -> PipelineReport:
        """Decode a raw request body and deliver it. Raises DecodeError."""
        notification = self._source.decode(raw)
        return await self.process(notification)

    async def process(self, notification: Notification) -> PipelineReport:
        groups = group_by_status(notification.alerts)
        logger.info(
            f"Processing {len(notification.alerts)} alert(s) in {len(groups)} status group(s)"
        )

        report = PipelineReport()
        for status, alerts in groups.items():
            outcome = await self._channel.send_safe(status, alerts)
            report.outcomes.append(outcome)

        if report.failed:
            logger.warning(
                f"Delivered {report.delivered} of {len(report.outcomes)} group(s) "
                f"to {self._channel.name}; failed: "
                f"{[outcome.status for outcome in report.outcomes if not outcome.ok]}"
            )
        elif report.outcomes:
            logger.info(f"Delivered {report.delivered} group(s) to {self._channel.name}")

        return report
