"""Alertmanager webhook notification models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

FIRING = "firing"


def is_firing_status(status: str) -> bool:
    """Whether a status value means firing (case-insensitive)."""
    return status.upper() == FIRING.upper()


class AlertmanagerModel(BaseModel):
    """Base for decoded payload models: immutable, camelCase aliases, nulls as empty."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


def null_values_to_empty(value: Any) -> Any:
    """Replace null map values with empty strings."""
    if isinstance(value, dict):
        return {key: "" if item is None else item for key, item in value.items()}
    return value


class Alert(AlertmanagerModel):
    """A single alert within a notification."""

    status: str = Field(default="", description="Alert status, e.g. firing/resolved")
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    starts_at: str = Field(default="", alias="startsAt")
    ends_at: str = Field(default="", alias="endsAt")
    generator_url: str = Field(default="", alias="generatorURL")
    fingerprint: str = Field(default="")

    @field_validator("labels", "annotations", mode="before")
    @classmethod
    def empty_null_values(cls, value: Any) -> Any:
        return null_values_to_empty(value)

    @property
    def summary(self) -> str:
        return self.annotations.get("summary", "")

    @property
    def description(self) -> str:
        return self.annotations.get("description", "")

    @property
    def is_firing(self) -> bool:
        return is_firing_status(self.status)


class Notification(AlertmanagerModel):
    """A grouped Alertmanager webhook notification.

    Only ``alerts`` is used for delivery; the remaining fields are kept so
    they can be logged or inspected.
    """

    version: str = Field(default="")
    group_key: str = Field(default="", alias="groupKey")
    truncated_alerts: int = Field(default=0, alias="truncatedAlerts")
    status: str = Field(default="")
    receiver: str = Field(default="")
    group_labels: dict[str, str] = Field(default_factory=dict, alias="groupLabels")
    common_labels: dict[str, str] = Field(default_factory=dict, alias="commonLabels")
    common_annotations: dict[str, str] = Field(default_factory=dict, alias="commonAnnotations")
    external_url: str = Field(default="", alias="externalURL")
    alerts: list[Alert] = Field(default_factory=list)

    @field_validator("group_labels", "common_labels", "common_annotations", mode="before")
    @classmethod
    def empty_null_values(cls, value: Any) -> Any:
        return null_values_to_empty(value)
