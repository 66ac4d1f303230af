"""Discord webhook channel implementation."""

import logging
from collections.abc import Sequence

import httpx

from alertbridge.channels.base import BaseChannel
from alertbridge.exceptions import DeliveryResponseReadError, DeliveryTransportError
from alertbridge.models.alert import Alert, is_firing_status
from alertbridge.models.delivery import DeliveryResult
from alertbridge.models.discord import (
    DiscordAuthor,
    DiscordEmbed,
    DiscordField,
    DiscordFooter,
    DiscordMessage,
)

logger = logging.getLogger(__name__)

USERNAME = "Prometheus"
AVATAR_URL = "https://avatars1.githubusercontent.com/u/3380462?s=200&v=4"

FIRING_ICON_URL = "https://www.iconfinder.com/icons/116853/download/png/128"
RESOLVED_ICON_URL = "https://www.iconfinder.com/icons/2682848/download/png/128"

FIRING_COLOR = 0
RESOLVED_COLOR = 255

LABELS_FIELD_NAME = "Labels:"


def classify_status(status: str) -> tuple[str, int]:
    """Return the (icon URL, embed color) for a status.

    Only "firing" (any case) is treated as firing; every other status,
    including unknown ones, is rendered as resolved.
    """
    if is_firing_status(status):
        return FIRING_ICON_URL, FIRING_COLOR
    return RESOLVED_ICON_URL, RESOLVED_COLOR


def format_labels(labels: dict[str, str]) -> str:
    return "".join(f"**{key}:** {value}\n" for key, value in labels.items())


class DiscordChannel(BaseChannel):
    """Discord webhook channel."""

    def __init__(
        self,
        webhook_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._webhook_url = webhook_url
        self._timeout = timeout
        self._transport = transport

    @property
    def name(self) -> str:
        return "discord"

    def _build_embed(self, status: str, alert: Alert) -> DiscordEmbed:
        icon_url, color = classify_status(status)
        return DiscordEmbed(
            title=f"**{alert.summary}**",
            author=DiscordAuthor(name=status.upper(), icon_url=icon_url),
            description=alert.description,
            fields=[DiscordField(name=LABELS_FIELD_NAME, value=format_labels(alert.labels))],
            color=color,
            footer=DiscordFooter(text=""),
        )

    def build_message(self, status: str, alerts: Sequence[Alert]) -> DiscordMessage:
        """Build one webhook message with an embed per alert, in order."""
        return DiscordMessage(
            username=USERNAME,
            avatar_url=AVATAR_URL,
            embeds=[self._build_embed(status, alert) for alert in alerts],
        )

    async def deliver(self, message: DiscordMessage) -> DeliveryResult:
        """POST a message to the webhook.

        Raises DeliveryTransportError when the webhook cannot be reached.
        A response whose body cannot be read is still returned, with the
        read error in place of the body.
        """
        payload = message.model_dump(mode="json")

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                async with client.stream("POST", self._webhook_url, json=payload) as response:
                    try:
                        await response.aread()
                        body = response.text
                    except httpx.HTTPError as e:
                        read_error = DeliveryResponseReadError(str(e))
                        logger.warning(str(read_error))
                        body = str(read_error)
        except httpx.TransportError as e:
            raise DeliveryTransportError(self._webhook_url, str(e) or type(e).__name__) from e

        logger.info(
            f"Discord webhook response: [httpStatus: {response.status_code}; body: {body}]"
        )
        return DeliveryResult(status_code=response.status_code, body=body)

    async def send(self, status: str, alerts: Sequence[Alert]) -> DeliveryResult:
        message = self.build_message(status, alerts)
        return await self.deliver(message)
