"""Alerts store: notification entries with read tracking."""

from collections.abc import Sequence
from typing import Any

from stockpos.models.alert import Alert, AlertLevel
from stockpos.utils.logging import get_logger

logger = get_logger(__name__)


class AlertsStore:
    """Owns alerts, most recent first."""

    def __init__(self) -> None:
        self._alerts: list[Alert] = []

    @property
    def alerts(self) -> Sequence[Alert]:
        return tuple(self._alerts)

    def add_alert(
        self,
        message: str,
        level: AlertLevel | str = AlertLevel.INFO,
        item_id: str | None = None,
    ) -> Alert:
        alert = Alert(message=message, level=AlertLevel(level), item_id=item_id)
        self._alerts.insert(0, alert)
        logger.debug("alert_added", alert_id=alert.id, level=alert.level, item_id=item_id)
        return alert

    def mark_as_read(self, alert_id: str) -> Alert | None:
        for index, alert in enumerate(self._alerts):
            if alert.id == alert_id:
                updated = alert.model_copy(update={"read": True})
                self._alerts[index] = updated
                return updated
        logger.debug("alert_not_found", alert_id=alert_id)
        return None

    def remove_alert(self, alert_id: str) -> bool:
        before = len(self._alerts)
        self._alerts = [a for a in self._alerts if a.id != alert_id]
        return len(self._alerts) < before

    def clear_alerts(self) -> None:
        self._alerts = []
        logger.debug("alerts_cleared")

    def unread(self) -> list[Alert]:
        return [a for a in self._alerts if not a.read]

    def unread_count(self) -> int:
        return len(self.unread())

    def unread_for_item(self, item_id: str) -> list[Alert]:
        return [a for a in self._alerts if not a.read and a.item_id == item_id]

    # Serialization

    def snapshot(self) -> dict[str, Any]:
        return {"alerts": [a.model_dump(mode="json") for a in self._alerts]}

    def restore(self, data: dict[str, Any]) -> None:
        self._alerts = [Alert.model_validate(raw) for raw in data.get("alerts", [])]

    def reset(self) -> None:
        self.clear_alerts()
