"""Delivery outcome models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DeliveryResult(BaseModel):
    """Response of one webhook call."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str = ""


class GroupOutcome(BaseModel):
    """Outcome of building and delivering one status group."""

    status: str
    alert_count: int
    result: DeliveryResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None and self.error is None


class PipelineReport(BaseModel):
    """Per-group outcomes of one inbound notification."""

    outcomes: list[GroupOutcome] = Field(default_factory=list)

    @property
    def delivered(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.delivered

    def summary(self) -> dict[str, Any]:
        return {
            "status": "ok",
            "groups": len(self.outcomes),
            "delivered": self.delivered,
            "failed": self.failed,
            "results": [
                {
                    "status": outcome.status,
                    "alerts": outcome.alert_count,
                    "http_status": outcome.result.status_code if outcome.result else None,
                    "error": outcome.error,
                }
                for outcome in self.outcomes
            ],
        }
