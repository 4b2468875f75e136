"""Scan actions: barcode lookups and quick stock adjustments."""

from typing import Any

from stockpos.actions.base import BaseAction
from stockpos.models.cart import CartLine
from stockpos.models.inventory import InventoryItem
from stockpos.state.inventory import StockDirection
from stockpos.state.manager import AppState
from stockpos.utils.parsing import parse_quantity
from stockpos.utils.tracing import ActionTracer


class ScanActions(BaseAction):
    """
    Scanner screen actions.

    Responsibilities:
    - Resolve barcodes against the catalog
    - Adjust stock of the last scanned item
    - Push the last scanned item into the POS cart
    """

    def __init__(self, state: AppState, tracer: ActionTracer | None = None):
        super().__init__("scan", state, tracer)
        self.register_actions()

    def register_actions(self) -> None:
        """Register scan actions."""
        self.register_action("scan_barcode", self.scan_barcode)
        self.register_action("select_from_history", self.select_from_history)
        self.register_action("quick_adjust", self.quick_adjust)
        self.register_action("add_scanned_to_cart", self.add_scanned_to_cart)

    def _require_last_scanned(self) -> InventoryItem:
        last = self.state.scan.last_scanned
        if last is None:
            raise ValueError("Scan an item first")
        return last

    def scan_barcode(self, barcode: str) -> InventoryItem:
        """Look up a barcode and record the scan."""
        item = self.state.inventory.get_item_by_barcode((barcode or "").strip())
        if item is None:
            raise ValueError("No item found with this barcode")

        self.state.scan.set_last_scanned(item)
        return item

    def select_from_history(self, index: int) -> InventoryItem:
        """Re-select a previous scan; it is recorded again at the top."""
        history = self.state.scan.history
        if not 0 <= index < len(history):
            raise ValueError("No such scan in history")

        item = history[index].item
        self.state.scan.set_last_scanned(item)
        return item

    def quick_adjust(self, quantity: Any, direction: StockDirection) -> InventoryItem:
        """Stock the last scanned item in or out."""
        last = self._require_last_scanned()
        if direction not in ("in", "out"):
            raise ValueError("Direction must be 'in' or 'out'")

        qty = parse_quantity(quantity, default=None)
        if qty is None or qty <= 0:
            raise ValueError("Please enter a valid quantity")

        current = self.state.inventory.get_item(last.id)
        if current is None:
            raise ValueError("Item not found")
        if direction == "out" and qty > current.qty:
            raise ValueError("Cannot remove more than available stock")

        updated = self.state.inventory.adjust_stock(last.id, qty, direction)
        self.state.scan.refresh_last_scanned(updated)
        return updated

    def add_scanned_to_cart(self) -> CartLine:
        """Add the last scanned item to the POS cart."""
        last = self._require_last_scanned()
        current = self.state.inventory.get_item(last.id)
        if current is None or current.qty <= 0:
            raise ValueError("This item is currently out of stock")

        return self.state.cart.add_to_cart(current)
