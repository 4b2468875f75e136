"""Tests for the orders store."""

from decimal import Decimal

import pytest

from stockpos.models.order import OrderDraft, OrderLine, OrderStatus
from stockpos.state.orders import OrdersStore


@pytest.fixture
def orders() -> OrdersStore:
    return OrdersStore(first_order_number=1001)


def test_sequential_order_ids(orders: OrdersStore) -> None:
    """Test sequential purchase order numbers."""
    first = orders.add_order(OrderDraft(supplier="A", total=Decimal("10")))
    second = orders.add_order(OrderDraft(supplier="B", total=Decimal("5")))

    assert first.id == "PO-1001"
    assert second.id == "PO-1002"
    assert [o.id for o in orders.orders] == ["PO-1002", "PO-1001"]
    assert orders.next_order_number == 1003


def test_update_order_status(orders: OrdersStore) -> None:
    """Test changing an order status."""
    order = orders.add_order(OrderDraft(supplier="A"))
    assert order.updated_at is None

    updated = orders.update_order_status(order.id, "received")

    assert updated.status == OrderStatus.RECEIVED
    assert updated.updated_at is not None
    assert updated.created_at == order.created_at
    assert orders.update_order_status("PO-9999", OrderStatus.RECEIVED) is None


def test_partitions_and_value(orders: OrdersStore) -> None:
    """Test pending and received partitions and total value."""
    received = orders.add_order(
        OrderDraft(
            supplier="A",
            status=OrderStatus.RECEIVED,
            lines=[OrderLine(product_name="Gloves", quantity=3, unit_price=Decimal("4"))],
        )
    )
    pending = orders.add_order(OrderDraft(supplier="A", total=Decimal("8")))
    cancelled = orders.add_order(OrderDraft(supplier="B", status=OrderStatus.CANCELLED))

    assert orders.received_orders() == [received]
    assert orders.pending_orders() == [pending]
    assert cancelled not in orders.received_orders()
    assert orders.total_order_value() == Decimal("20")
    assert orders.supplier_count() == 2


def test_counter_survives_snapshot(orders: OrdersStore) -> None:
    """Test that order numbering survives a snapshot."""
    orders.add_order(OrderDraft(supplier="A"))

    other = OrdersStore()
    other.restore(orders.snapshot())

    assert other.orders == orders.orders
    assert other.add_order(OrderDraft(supplier="B")).id == "PO-1002"


def test_reset_restarts_numbering(orders: OrdersStore) -> None:
    """Test that reset restarts order numbering."""
    orders.add_order(OrderDraft())
    orders.reset()

    assert orders.orders == ()
    assert orders.add_order(OrderDraft()).id == "PO-1001"
