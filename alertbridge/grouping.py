"""Partitioning of alerts by status."""

from collections.abc import Iterable

from alertbridge.models.alert import Alert


def group_by_status(alerts: Iterable[Alert]) -> dict[str, list[Alert]]:
    """Group alerts by their exact status value.

    Each alert lands in exactly one group, and alerts keep their input
    order within a group. Status values are not normalized.
    """
    groups: dict[str, list[Alert]] = {}
    for alert in alerts:
        groups.setdefault(alert.status, []).append(alert)
    return groups
