"""Receiving actions: supplier deliveries and purchase orders."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from stockpos.actions.base import BaseAction
from stockpos.models.order import OrderDraft, OrderLine, OrderStatus, PurchaseOrder
from stockpos.state.manager import AppState
from stockpos.utils.parsing import parse_amount, parse_quantity
from stockpos.utils.tracing import ActionTracer


class ReceivingResult(BaseModel):
    """Outcome of stocking in a delivery."""

    order: PurchaseOrder
    stocked_item_ids: list[str] = Field(default_factory=list)
    unmatched_products: list[str] = Field(default_factory=list)


class ReceivingActions(BaseAction):
    """
    Receiving actions.

    Responsibilities:
    - Collect a pending list of received lines
    - Record deliveries and purchase orders
    - Stock in lines whose product name matches an inventory item
    """

    def __init__(self, state: AppState, tracer: ActionTracer | None = None):
        super().__init__("receiving", state, tracer)
        self.pending_lines: list[OrderLine] = []
        self.register_actions()

    def register_actions(self) -> None:
        """Register receiving actions."""
        self.register_action("add_line", self.add_line)
        self.register_action("remove_line", self.remove_line)
        self.register_action("save_all", self.save_all)
        self.register_action("create_order", self.create_order)
        self.register_action("receive_order", self.receive_order)
        self.register_action("cancel_order", self.cancel_order)

    @staticmethod
    def build_line(product_name: str, quantity: Any, unit_price: Any) -> OrderLine:
        """Validate one received product line."""
        if not product_name or not product_name.strip():
            raise ValueError("Please enter product name")

        qty = parse_quantity(quantity, default=None)
        if qty is None or qty <= 0:
            raise ValueError("Please enter a valid quantity")

        price = parse_amount(unit_price, default=None)
        if price is None or price <= 0:
            raise ValueError("Please enter a valid unit price")

        return OrderLine(product_name=product_name.strip(), quantity=qty, unit_price=price)

    def add_line(self, product_name: str, quantity: Any, unit_price: Any) -> OrderLine:
        """Append a line to the pending delivery."""
        line = self.build_line(product_name, quantity, unit_price)
        self.pending_lines.append(line)
        return line

    def remove_line(self, line_id: str) -> bool:
        before = len(self.pending_lines)
        self.pending_lines = [line for line in self.pending_lines if line.id != line_id]
        return len(self.pending_lines) < before

    def pending_total(self) -> tuple[int, Decimal]:
        """Units and value of the pending delivery."""
        qty = sum(line.quantity for line in self.pending_lines)
        value = sum((line.total_price for line in self.pending_lines), Decimal("0"))
        return qty, value

    def _stock_in(self, lines: tuple[OrderLine, ...] | list[OrderLine]) -> tuple[list[str], list[str]]:
        stocked: list[str] = []
        unmatched: list[str] = []
        for line in lines:
            item = self.state.inventory.find_by_name(line.product_name)
            if item is None:
                unmatched.append(line.product_name)
                continue
            self.state.inventory.adjust_stock(item.id, line.quantity, "in")
            stocked.append(item.id)
        return stocked, unmatched

    def save_all(self, supplier: str) -> ReceivingResult:
        """Record the pending delivery as received and stock it in."""
        if not supplier or not supplier.strip():
            raise ValueError("Please enter supplier name")
        if not self.pending_lines:
            raise ValueError("Please add at least one product")

        with self.state.atomic("inventory", "orders"):
            order = self.state.orders.add_order(
                OrderDraft(
                    supplier=supplier.strip(),
                    lines=self.pending_lines,
                    status=OrderStatus.RECEIVED,
                )
            )
            stocked, unmatched = self._stock_in(order.lines)

        self.pending_lines = []
        self.logger.log_action(
            action="delivery_received",
            order_id=order.id,
            supplier=order.supplier,
            lines=len(order.lines),
            unmatched=len(unmatched),
        )
        return ReceivingResult(
            order=order, stocked_item_ids=stocked, unmatched_products=unmatched
        )

    def create_order(
        self, supplier: str, lines: list[dict[str, Any]], notes: str | None = None
    ) -> PurchaseOrder:
        """Record a pending purchase order without touching stock."""
        if not supplier or not supplier.strip():
            raise ValueError("Please enter supplier name")
        if not lines:
            raise ValueError("Please add at least one product")

        order_lines = [
            self.build_line(
                line.get("product_name", ""), line.get("quantity"), line.get("unit_price")
            )
            for line in lines
        ]
        return self.state.orders.add_order(
            OrderDraft(supplier=supplier.strip(), lines=order_lines, notes=notes)
        )

    def receive_order(self, order_id: str) -> ReceivingResult:
        """Mark a pending order received and stock in its lines."""
        order = self.state.orders.get_order(order_id)
        if order is None:
            raise ValueError(f"Order {order_id} not found")
        if order.status != OrderStatus.PENDING:
            raise ValueError(f"Order {order_id} is already {order.status.value}")

        with self.state.atomic("inventory", "orders"):
            stocked, unmatched = self._stock_in(order.lines)
            updated = self.state.orders.update_order_status(order_id, OrderStatus.RECEIVED)

        return ReceivingResult(
            order=updated, stocked_item_ids=stocked, unmatched_products=unmatched
        )

    def cancel_order(self, order_id: str) -> PurchaseOrder:
        order = self.state.orders.get_order(order_id)
        if order is None:
            raise ValueError(f"Order {order_id} not found")
        if order.status != OrderStatus.PENDING:
            raise ValueError(f"Order {order_id} is already {order.status.value}")

        return self.state.orders.update_order_status(order_id, OrderStatus.CANCELLED)
