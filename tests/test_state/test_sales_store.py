"""Tests for the sales store."""

from datetime import timedelta
from decimal import Decimal

import pytest

from stockpos.models.cart import CartLine
from stockpos.models.sales import PaymentMethod, TransactionDraft
from stockpos.state.sales import SalesStore
from stockpos.utils.clock import today


@pytest.fixture
def sales() -> SalesStore:
    return SalesStore()


def _draft(total: str, cost: str | None = None, lines: list[CartLine] | None = None) -> TransactionDraft:
    return TransactionDraft(
        items=lines or [],
        total=Decimal(total),
        cost=Decimal(cost) if cost is not None else None,
        payment_method=PaymentMethod.CARD,
        amount_received=Decimal(total),
    )


def test_transactions_are_prepended_with_distinct_ids(sales: SalesStore) -> None:
    """Test that new sales come first with unique ids."""
    recorded = [sales.add_transaction(_draft(str(n))) for n in range(5)]

    assert sales.transaction_count() == 5
    assert [t.id for t in sales.transactions] == [t.id for t in reversed(recorded)]
    assert len({t.id for t in recorded}) == 5
    assert all(t.id.startswith("TXN-") for t in recorded)


def test_transaction_items_are_snapshots(sales: SalesStore) -> None:
    """Test that sale lines are copies."""
    lines = [CartLine(item_id="a", name="Gloves", price=Decimal("10"), qty=2)]
    transaction = sales.add_transaction(_draft("20", lines=lines))

    lines.append(CartLine(item_id="b", name="Masks", price=Decimal("1")))

    assert len(transaction.items) == 1
    assert sales.get_transaction(transaction.id).items[0].qty == 2


def test_dict_draft_is_accepted(sales: SalesStore) -> None:
    """Test recording a sale from a plain dict."""
    transaction = sales.add_transaction({"total": "15", "cost": "5", "payment_method": "cash"})
    assert transaction.profit == Decimal("10")
    assert transaction.payment_method == PaymentMethod.CASH


def test_totals_and_profit(sales: SalesStore) -> None:
    """Test sales and profit totals."""
    sales.add_transaction(_draft("100", cost="60"))
    sales.add_transaction(TransactionDraft(total=Decimal("50"), profit=Decimal("20")))

    assert sales.total_sales() == Decimal("150")
    assert sales.total_profit() == Decimal("60")
    assert sales.average_transaction_value() == Decimal("75")


def test_today_filters_by_calendar_day(sales: SalesStore) -> None:
    """Test that today's sales match on calendar day."""
    sales.add_transaction(_draft("30"))
    sales.add_transaction(_draft("20"))

    assert len(sales.today_transactions()) == 2
    assert sales.today_sales() == Decimal("50")
    assert sales.today_transactions(today() - timedelta(days=1)) == []
    assert sales.today_sales(today() + timedelta(days=1)) == 0


def test_sales_by_category(sales: SalesStore) -> None:
    """Test sales grouped by category."""
    sales.add_transaction(
        _draft(
            "0",
            lines=[
                CartLine(item_id="a", name="A", category="Medical", price=Decimal("10"), qty=2),
                CartLine(item_id="b", name="B", category="Equipment", price=Decimal("5"), qty=1),
            ],
        )
    )
    sales.add_transaction(
        _draft("0", lines=[CartLine(item_id="a", name="A", category="Medical", price=Decimal("10"))])
    )

    assert sales.sales_by_category() == {"Medical": Decimal("30"), "Equipment": Decimal("5")}
    assert sales.items_sold() == 3


def test_empty_average(sales: SalesStore) -> None:
    """Test the average with no sales."""
    assert sales.average_transaction_value() == 0


def test_snapshot_restore_keeps_ids_unique(sales: SalesStore) -> None:
    """Test that ids stay unique after a restore."""
    first = sales.add_transaction(_draft("10"))

    other = SalesStore()
    other.restore(sales.snapshot())
    second = other.add_transaction(_draft("10"))

    assert other.transactions[1] == first
    assert second.id != first.id
