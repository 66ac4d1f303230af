"""Shared fixtures for alertbridge tests."""

import json
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from alertbridge.channels.discord import DiscordChannel
from alertbridge.config import get_settings
from alertbridge.pipeline import NotificationPipeline
from alertbridge.sources.alertmanager import AlertmanagerSource

WEBHOOK_URL = "https://discord.com/api/webhooks/123/abc"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses."""

    def __init__(self, *responses: httpx.Response | Exception) -> None:
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(204)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Clear settings cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_alert() -> Callable[..., dict[str, Any]]:
    """Factory for raw Alertmanager alert dicts."""

    def _make(
        status: str = "firing",
        summary: str = "CPU high",
        description: str = "CPU > 90%",
        labels: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return {
            "status": status,
            "labels": {"alertname": "HighCPU"} if labels is None else labels,
            "annotations": {"summary": summary, "description": description},
            "startsAt": "2024-05-01T10:00:00Z",
            "endsAt": "0001-01-01T00:00:00Z",
            "generatorURL": "http://prometheus:9090/graph?g0.expr=cpu",
        }

    return _make


@pytest.fixture
def notification_payload(make_alert: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    """A full Alertmanager notification with one firing and one resolved alert."""
    return {
        "version": "4",
        "groupKey": '{}:{alertname="HighCPU"}',
        "truncatedAlerts": 0,
        "status": "firing",
        "receiver": "discord",
        "groupLabels": {"alertname": "HighCPU"},
        "commonLabels": {"alertname": "HighCPU"},
        "commonAnnotations": {},
        "externalURL": "http://alertmanager:9093",
        "alerts": [
            make_alert(status="firing", labels={"alertname": "HighCPU", "instance": "web-1"}),
            make_alert(
                status="resolved",
                summary="CPU normal",
                description="CPU back under 90%",
                labels={"alertname": "HighCPU", "instance": "web-2"},
            ),
        ],
    }


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def channel(handler: RecordingHandler) -> DiscordChannel:
    return DiscordChannel(webhook_url=WEBHOOK_URL, transport=httpx.MockTransport(handler))


@pytest.fixture
def pipeline(channel: DiscordChannel) -> NotificationPipeline:
    return NotificationPipeline(AlertmanagerSource(), channel)


@pytest.fixture
def make_channel() -> Callable[..., tuple[DiscordChannel, RecordingHandler]]:
    """Factory for a Discord channel backed by scripted responses."""

    def _make(*responses: httpx.Response | Exception) -> tuple[DiscordChannel, RecordingHandler]:
        recorder = RecordingHandler(*responses)
        return (
            DiscordChannel(webhook_url=WEBHOOK_URL, transport=httpx.MockTransport(recorder)),
            recorder,
        )

    return _make
