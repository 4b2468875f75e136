"""Orders store: supplier purchase orders and receiving records."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any

from stockpos.models.order import OrderDraft, OrderStatus, PurchaseOrder
from stockpos.utils.clock import now
from stockpos.utils.logging import get_logger

logger = get_logger(__name__)


def pending_orders(orders: Iterable[PurchaseOrder]) -> list[PurchaseOrder]:
    """Orders still awaiting delivery. Cancelled orders are in neither partition."""
    return [o for o in orders if o.status == OrderStatus.PENDING]


def received_orders(orders: Iterable[PurchaseOrder]) -> list[PurchaseOrder]:
    return [o for o in orders if o.status == OrderStatus.RECEIVED]


def total_order_value(orders: Iterable[PurchaseOrder]) -> Decimal:
    return sum((o.total for o in orders), Decimal("0"))


class OrdersStore:
    """Owns purchase orders, most recent first, with sequential numbering."""

    def __init__(self, first_order_number: int = 1001) -> None:
        self.first_order_number = first_order_number
        self.next_order_number = first_order_number
        self._orders: list[PurchaseOrder] = []

    @property
    def orders(self) -> Sequence[PurchaseOrder]:
        return tuple(self._orders)

    def add_order(self, draft: OrderDraft | dict[str, Any]) -> PurchaseOrder:
        """Record an order as PO-<n> and advance the counter."""
        if isinstance(draft, dict):
            draft = OrderDraft.model_validate(draft)

        order = PurchaseOrder(
            id=f"PO-{self.next_order_number}",
            supplier=draft.supplier,
            lines=tuple(draft.lines),
            status=draft.status,
            total=draft.total if draft.total is not None else Decimal("0"),
            notes=draft.notes,
            created_at=now(),
        )
        self.next_order_number += 1
        self._orders.insert(0, order)

        logger.debug(
            "order_added",
            order_id=order.id,
            supplier=order.supplier,
            status=order.status,
            total=str(order.total),
        )
        return order

    def update_order_status(
        self, order_id: str, status: OrderStatus | str
    ) -> PurchaseOrder | None:
        """Set an order's status and stamp updated_at. None if unknown."""
        status = OrderStatus(status)
        for index, order in enumerate(self._orders):
            if order.id == order_id:
                updated = order.model_copy(update={"status": status, "updated_at": now()})
                self._orders[index] = updated
                logger.debug("order_status_updated", order_id=order_id, status=status)
                return updated

        logger.debug("order_not_found", order_id=order_id)
        return None

    def get_order(self, order_id: str) -> PurchaseOrder | None:
        return next((o for o in self._orders if o.id == order_id), None)

    def pending_orders(self) -> list[PurchaseOrder]:
        return pending_orders(self._orders)

    def received_orders(self) -> list[PurchaseOrder]:
        return received_orders(self._orders)

    def total_order_value(self) -> Decimal:
        return total_order_value(self._orders)

    def supplier_count(self) -> int:
        """Distinct suppliers across all orders."""
        return len({o.supplier for o in self._orders if o.supplier})

    # Serialization

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready copy of the store, including the order counter."""
        return {
            "orders": [o.model_dump(mode="json") for o in self._orders],
            "next_order_number": self.next_order_number,
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Replace the store contents from a snapshot."""
        self._orders = [PurchaseOrder.model_validate(raw) for raw in data.get("orders", [])]
        self.next_order_number = int(
            data.get("next_order_number", self.first_order_number)
        )

    def reset(self) -> None:
        self._orders = []
        self.next_order_number = self.first_order_number
