"""Tests for POS actions and checkout."""

from decimal import Decimal

import pytest

from stockpos.actions.pos import CheckoutCommand, PosActions
from stockpos.models.inventory import InventoryItem, StockStatus
from stockpos.models.sales import PaymentMethod
from stockpos.state.manager import AppState


@pytest.fixture
def pos(state: AppState) -> PosActions:
    return PosActions(state)


def test_add_to_cart_respects_stock(pos: PosActions, state: AppState) -> None:
    """Test that the cart cannot hold more than the stock on hand."""
    item = state.inventory.add_item({"name": "Thermometer", "qty": 2, "price": "100"})

    pos.add_to_cart(item.id)
    pos.add_to_cart(item.id)

    with pytest.raises(ValueError, match="Only 2 available"):
        pos.add_to_cart(item.id)
    assert state.cart.get_line(item.id).qty == 2


def test_add_unknown_item(pos: PosActions) -> None:
    """Test adding an item that does not exist."""
    with pytest.raises(ValueError, match="Item not found"):
        pos.add_to_cart("missing")


def test_change_quantity(pos: PosActions, state: AppState, masks: InventoryItem) -> None:
    """Test stepping a cart line up and down."""
    pos.add_to_cart(masks.id)

    assert pos.change_quantity(masks.id, 2).qty == 3
    with pytest.raises(ValueError):
        pos.change_quantity(masks.id, 1)
    assert pos.change_quantity(masks.id, -3) is None
    assert state.cart.is_empty()


@pytest.mark.parametrize("value", ["-1", "101", "abc", None])
def test_apply_discount_rejects_out_of_range(pos: PosActions, value: object) -> None:
    """Test that discounts outside 0-100 are rejected."""
    with pytest.raises(ValueError, match="valid discount"):
        pos.apply_discount(value)


def test_apply_discount(pos: PosActions, state: AppState) -> None:
    """Test applying a valid discount."""
    assert pos.apply_discount("12.5") == Decimal("12.5")
    assert state.cart.discount == Decimal("12.5")


def test_browse_hides_out_of_stock(pos: PosActions, state: AppState, gloves: InventoryItem) -> None:
    """Test that the product grid only shows items in stock."""
    state.inventory.add_item({"name": "Empty Glove Box", "qty": 0})

    assert pos.browse("glove") == [gloves]
    assert pos.browse(category="All") == [gloves]
    assert pos.browse(category="Equipment") == []


def test_cash_checkout(pos: PosActions, state: AppState, gloves: InventoryItem) -> None:
    """Test a cash sale end to end."""
    pos.add_to_cart(gloves.id)
    pos.add_to_cart(gloves.id)
    pos.apply_discount(10)

    transaction = pos.checkout("cash", "150")

    # subtotal 100, tax 10, discount 10
    assert transaction.total == Decimal("100")
    assert transaction.discount == Decimal("10")
    assert transaction.cost == Decimal("60")
    assert transaction.profit == Decimal("40")
    assert transaction.amount_received == Decimal("150")
    assert transaction.change == Decimal("50")
    assert transaction.payment_method == PaymentMethod.CASH

    assert state.inventory.get_item(gloves.id).qty == gloves.qty - 2
    assert state.sales.transactions == (transaction,)
    assert state.cart.is_empty()
    assert state.cart.discount == 0


def test_card_checkout(pos: PosActions, state: AppState, masks: InventoryItem) -> None:
    """Test that card payments need no cash amount."""
    pos.add_to_cart(masks.id)
    pos.add_to_cart(masks.id)
    pos.add_to_cart(masks.id)

    transaction = pos.checkout(PaymentMethod.CARD)

    assert transaction.amount_received == transaction.total
    assert transaction.change == 0
    item = state.inventory.get_item(masks.id)
    assert item.qty == 0
    assert item.status == StockStatus.DANGER


def test_cash_checkout_requires_enough_money(pos: PosActions, state: AppState, gloves: InventoryItem) -> None:
    """Test that cash below the total is refused."""
    pos.add_to_cart(gloves.id)

    with pytest.raises(ValueError, match="at least the total"):
        pos.checkout("cash", "10")
    with pytest.raises(ValueError):
        pos.checkout("cash", "not money")

    assert state.sales.transaction_count() == 0
    assert state.cart.item_count() == 1


def test_checkout_rejects_stale_cart(pos: PosActions, state: AppState, masks: InventoryItem) -> None:
    """Test checkout when stock dropped after items were carted."""
    pos.add_to_cart(masks.id)
    pos.add_to_cart(masks.id)
    state.inventory.adjust_stock(masks.id, 2, "out")

    with pytest.raises(ValueError, match="available in stock"):
        pos.checkout("card")

    assert state.inventory.get_item(masks.id).qty == 1
    assert state.cart.item_count() == 2


def test_transaction_is_not_affected_by_later_changes(
    pos: PosActions, state: AppState, gloves: InventoryItem
) -> None:
    """Test that recorded sales keep their line snapshots."""
    pos.add_to_cart(gloves.id)
    transaction = pos.checkout("card")

    state.inventory.update_item(gloves.id, {"price": "999", "name": "Renamed"})
    state.inventory.delete_item(gloves.id)

    stored = state.sales.get_transaction(transaction.id)
    assert stored.items[0].name == "Surgical Gloves"
    assert stored.items[0].price == Decimal("50.00")


def test_checkout_rolls_back_on_failure(
    pos: PosActions, state: AppState, gloves: InventoryItem, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that a failing checkout leaves every store untouched."""
    pos.add_to_cart(gloves.id)

    def explode(*args: object, **kwargs: object) -> None:
        raise RuntimeError("log unavailable")

    monkeypatch.setattr(state.sales, "add_transaction", explode)

    with pytest.raises(RuntimeError):
        pos.checkout("card")

    assert state.inventory.get_item(gloves.id).qty == gloves.qty
    assert state.cart.item_count() == 1
    assert state.sales.transaction_count() == 0


def test_checkout_plan_is_side_effect_free(state: AppState, gloves: InventoryItem) -> None:
    """Test that planning a checkout changes nothing."""
    state.cart.add_to_cart(gloves)

    plan = CheckoutCommand(state).plan("card")

    assert plan.subtotal == Decimal("50.00")
    assert plan.tax == Decimal("5.00")
    assert state.inventory.get_item(gloves.id).qty == gloves.qty
    assert state.cart.item_count() == 1


def test_checkout_is_traced(pos: PosActions, state: AppState, gloves: InventoryItem) -> None:
    """Test that applying a checkout records a timed trace event."""
    pos.add_to_cart(gloves.id)

    transaction = pos.checkout("card")

    event = state.tracer.recent(1)[0]
    assert event.event_type == "checkout_applied"
    assert event.metadata == {"cart_lines": 1, "transaction_id": transaction.id}
    assert event.duration_ms is not None
