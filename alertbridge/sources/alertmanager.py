"""Prometheus Alertmanager webhook parser."""

import logging
from typing import Any

from pydantic import ValidationError

from alertbridge.exceptions import DecodeError
from alertbridge.models.alert import Notification
from alertbridge.sources.base import BaseSource

logger = logging.getLogger(__name__)


class AlertmanagerSource(BaseSource):
    """Parser for Alertmanager webhook_config notifications.

    Missing fields default to empty values; invalid JSON or a payload of
    the wrong shape raises DecodeError.
    """

    @property
    def name(self) -> str:
        return "alertmanager"

    def parse(self, payload: dict[str, Any]) -> Notification:
        try:
            return Notification.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"invalid {self.name} payload: {e}") from e

    def decode(self, raw: bytes) -> Notification:
        try:
            notification = Notification.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(f"invalid {self.name} payload: {e}") from e

        logger.debug(
            f"Decoded {self.name} notification: receiver={notification.receiver}, "
            f"groupKey={notification.group_key}, alerts={len(notification.alerts)}"
        )
        return notification
