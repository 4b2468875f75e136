"""Tests for category and supplier actions."""

from decimal import Decimal

import pytest

from stockpos.actions.catalog import CatalogActions
from stockpos.models.inventory import InventoryItem
from stockpos.state.manager import AppState


@pytest.fixture
def catalog(state: AppState) -> CatalogActions:
    return CatalogActions(state)


def test_category_summary(
    catalog: CatalogActions, state: AppState, gloves: InventoryItem, masks: InventoryItem
) -> None:
    """Test per-category counts and stock value."""
    state.categories.add_category("Sanitizers")

    summary = {entry.name: entry for entry in catalog.category_summary()}

    assert summary["Medical Supplies"].count == 2
    assert summary["Medical Supplies"].value == Decimal("1075.00")
    assert summary["Medical Supplies"].is_custom is False
    assert summary["Sanitizers"].is_custom is True
    assert summary["Sanitizers"].count == 0


def test_add_category_rejects_duplicates(catalog: CatalogActions, gloves: InventoryItem) -> None:
    """Test that category names are unique regardless of case."""
    catalog.add_category("Sanitizers")

    with pytest.raises(ValueError, match="already exists"):
        catalog.add_category("sanitizers")
    with pytest.raises(ValueError, match="already exists"):
        catalog.add_category("MEDICAL SUPPLIES")
    with pytest.raises(ValueError, match="category name"):
        catalog.add_category("  ")


def test_delete_category(catalog: CatalogActions, state: AppState, gloves: InventoryItem) -> None:
    """Test that only unused categories can be deleted."""
    catalog.add_category("Sanitizers")

    with pytest.raises(ValueError, match="still has products"):
        catalog.delete_category("Medical Supplies")

    assert catalog.delete_category("Sanitizers") is True
    assert state.categories.categories == ()

    with pytest.raises(ValueError, match="not found"):
        catalog.delete_category("Sanitizers")


def test_suppliers(catalog: CatalogActions, state: AppState) -> None:
    """Test adding, updating and deleting suppliers."""
    with pytest.raises(ValueError, match="supplier name"):
        catalog.add_supplier("")

    supplier = catalog.add_supplier(" PharmaDist ", " 0945 ", "")
    assert supplier.name == "PharmaDist"
    assert supplier.contact == "0945"
    assert supplier.email is None

    assert catalog.update_supplier(supplier.id, {"email": "orders@pharmadist.com"}).email
    with pytest.raises(ValueError, match="supplier name"):
        catalog.update_supplier(supplier.id, {"name": " "})
    with pytest.raises(ValueError, match="not found"):
        catalog.update_supplier("missing", {"contact": "1"})

    assert catalog.delete_supplier(supplier.id) is True
    assert state.suppliers.suppliers == ()
