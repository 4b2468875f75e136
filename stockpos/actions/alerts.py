"""Alert actions: low stock monitoring."""

from stockpos.actions.base import BaseAction
from stockpos.models.alert import Alert, AlertLevel
from stockpos.models.inventory import InventoryItem, StockStatus
from stockpos.state.manager import AppState
from stockpos.utils.tracing import ActionTracer


def stock_alert_message(item: InventoryItem) -> str:
    if item.status == StockStatus.DANGER:
        return f"Out of stock: {item.name}"
    return f"Low stock: {item.name} ({item.qty} left)"


class AlertActions(BaseAction):
    """Raises and manages stock alerts derived from the inventory."""

    def __init__(self, state: AppState, tracer: ActionTracer | None = None):
        super().__init__("alerts", state, tracer)
        self.register_actions()

    def register_actions(self) -> None:
        """Register alert actions."""
        self.register_action("scan_inventory", self.scan_inventory)
        self.register_action("mark_read", self.mark_read)
        self.register_action("clear", self.clear)

    def scan_inventory(self) -> list[Alert]:
        """
        Raise one alert per low or out of stock item.

        Items that already have an unread alert are skipped.
        """
        if not self.settings.low_stock_alerts:
            return []

        raised = []
        for item in self.state.inventory.items:
            if item.status == StockStatus.SUCCESS:
                continue
            if self.state.alerts.unread_for_item(item.id):
                continue

            level = AlertLevel.DANGER if item.status == StockStatus.DANGER else AlertLevel.WARNING
            raised.append(
                self.state.alerts.add_alert(stock_alert_message(item), level, item.id)
            )
        return raised

    def mark_read(self, alert_id: str) -> Alert:
        alert = self.state.alerts.mark_as_read(alert_id)
        if alert is None:
            raise ValueError("Alert not found")
        return alert

    def clear(self) -> None:
        self.state.alerts.clear_alerts()
