"""Inventory actions: item forms and manual stock adjustments."""

from decimal import Decimal
from typing import Any

from stockpos.actions.base import BaseAction
from stockpos.models.inventory import InventoryItem, ItemDraft
from stockpos.state.inventory import StockDirection
from stockpos.state.manager import AppState
from stockpos.utils.parsing import parse_amount, parse_quantity
from stockpos.utils.tracing import ActionTracer

_TEXT_FIELDS = ("barcode", "sku", "location", "description")


def _clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class InventoryActions(BaseAction):
    """
    Inventory screen actions.

    Form input arrives as raw strings; numbers are coerced here (anything
    non-numeric becomes 0) before the store sees them.
    """

    def __init__(self, state: AppState, tracer: ActionTracer | None = None):
        super().__init__("inventory", state, tracer)
        self.register_actions()

    def register_actions(self) -> None:
        """Register inventory actions."""
        self.register_action("add_item", self.add_item)
        self.register_action("update_item", self.update_item)
        self.register_action("adjust_stock", self.adjust_stock)
        self.register_action("delete_item", self.delete_item)

    def _coerce_form(self, form: dict[str, Any]) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        for name in _TEXT_FIELDS:
            if name in form:
                fields[name] = _clean_text(form[name])
        if "category" in form:
            fields["category"] = _clean_text(form["category"]) or self.settings.default_category
        for name in ("price", "cost"):
            if name in form:
                fields[name] = max(parse_amount(form[name]), Decimal("0"))
        for name in ("qty", "min_qty"):
            if name in form:
                fields[name] = max(parse_quantity(form[name]), 0)
        return fields

    def add_item(self, form: dict[str, Any]) -> InventoryItem:
        """Validate an add-item form and create the item."""
        name = _clean_text(form.get("name"))
        if not name:
            raise ValueError("Please enter item name")

        draft = ItemDraft(name=name, **self._coerce_form(form))
        return self.state.inventory.add_item(draft)

    def update_item(self, item_id: str, form: dict[str, Any]) -> InventoryItem:
        """Apply an edit form to an existing item."""
        if self.state.inventory.get_item(item_id) is None:
            raise ValueError("Item not found")

        patch = self._coerce_form(form)
        if "name" in form:
            name = _clean_text(form["name"])
            if not name:
                raise ValueError("Please enter item name")
            patch["name"] = name

        return self.state.inventory.update_item(item_id, patch)

    def adjust_stock(
        self, item_id: str, quantity: Any, direction: StockDirection
    ) -> InventoryItem:
        """Stock in or out, refusing over-draws."""
        item = self.state.inventory.get_item(item_id)
        if item is None:
            raise ValueError("Item not found")
        if direction not in ("in", "out"):
            raise ValueError("Direction must be 'in' or 'out'")

        qty = parse_quantity(quantity, default=None)
        if qty is None or qty <= 0:
            raise ValueError("Please enter a valid quantity")
        if direction == "out" and qty > item.qty:
            raise ValueError("Cannot remove more than available stock")

        return self.state.inventory.adjust_stock(item_id, qty, direction)

    def delete_item(self, item_id: str) -> bool:
        return self.state.inventory.delete_item(item_id)
