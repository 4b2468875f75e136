"""Tests for inventory form actions."""

from decimal import Decimal

import pytest

from stockpos.actions.inventory import InventoryActions
from stockpos.models.inventory import InventoryItem, StockStatus
from stockpos.state.manager import AppState


@pytest.fixture
def actions(state: AppState) -> InventoryActions:
    return InventoryActions(state)


def test_add_item_coerces_form(actions: InventoryActions) -> None:
    """Test that raw form fields are trimmed and coerced."""
    item = actions.add_item(
        {
            "name": "  Bandage Roll ",
            "barcode": " 123 ",
            "category": "",
            "price": "12.75",
            "cost": "abc",
            "qty": "7",
            "min": "ignored",
            "min_qty": "",
            "location": "",
        }
    )

    assert item.name == "Bandage Roll"
    assert item.barcode == "123"
    assert item.category == "Other"
    assert item.price == Decimal("12.75")
    assert item.cost == 0
    assert item.qty == 7
    assert item.min_qty == 0
    assert item.location is None
    assert item.status == StockStatus.SUCCESS


def test_add_item_requires_name(actions: InventoryActions) -> None:
    """Test that an item needs a name."""
    with pytest.raises(ValueError, match="item name"):
        actions.add_item({"name": "   ", "qty": "3"})


def test_negative_numbers_floor_at_zero(actions: InventoryActions) -> None:
    """Test that negative form numbers are stored as zero."""
    item = actions.add_item({"name": "Tape", "qty": "-4", "price": "-1"})
    assert item.qty == 0
    assert item.price == 0


def test_update_item(actions: InventoryActions, gloves: InventoryItem) -> None:
    """Test editing an item from a form."""
    updated = actions.update_item(gloves.id, {"qty": "2", "min_qty": "5"})

    assert updated.qty == 2
    assert updated.status == StockStatus.WARNING
    assert updated.name == gloves.name

    with pytest.raises(ValueError, match="item name"):
        actions.update_item(gloves.id, {"name": ""})
    with pytest.raises(ValueError, match="not found"):
        actions.update_item("missing", {"qty": "1"})


def test_adjust_stock_validation(actions: InventoryActions, masks: InventoryItem) -> None:
    """Test stock adjustment input checks."""
    with pytest.raises(ValueError, match="valid quantity"):
        actions.adjust_stock(masks.id, "0", "in")
    with pytest.raises(ValueError, match="more than available"):
        actions.adjust_stock(masks.id, masks.qty + 1, "out")
    with pytest.raises(ValueError, match="Direction"):
        actions.adjust_stock(masks.id, 1, "up")  # type: ignore[arg-type]

    assert actions.adjust_stock(masks.id, masks.qty, "out").qty == 0


def test_delete_item(actions: InventoryActions, state: AppState, gloves: InventoryItem) -> None:
    """Test deleting an item through the action registry."""
    result = actions.execute("delete_item", {"item_id": gloves.id})

    assert result.success is True
    assert result.result is True
    assert state.inventory.total_items() == 0
