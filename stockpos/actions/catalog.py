"""Catalog actions: custom categories and suppliers."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from stockpos.actions.base import BaseAction
from stockpos.models.catalog import Category, Supplier
from stockpos.state.manager import AppState
from stockpos.utils.tracing import ActionTracer

UNCATEGORIZED = "Uncategorized"


class CategorySummary(BaseModel):
    """Item count and stock value of one category."""

    name: str
    count: int = 0
    value: Decimal = Decimal("0")
    is_custom: bool = False


class CatalogActions(BaseAction):
    """Settings screen actions for categories and suppliers."""

    def __init__(self, state: AppState, tracer: ActionTracer | None = None):
        super().__init__("catalog", state, tracer)
        self.register_actions()

    def register_actions(self) -> None:
        """Register catalog actions."""
        self.register_action("category_summary", self.category_summary)
        self.register_action("add_category", self.add_category)
        self.register_action("delete_category", self.delete_category)
        self.register_action("add_supplier", self.add_supplier)
        self.register_action("update_supplier", self.update_supplier)
        self.register_action("delete_supplier", self.delete_supplier)

    def category_summary(self) -> list[CategorySummary]:
        """Categories in use by inventory, followed by unused custom ones."""
        summaries: dict[str, CategorySummary] = {}
        for item in self.state.inventory.items:
            name = item.category or UNCATEGORIZED
            summary = summaries.setdefault(name, CategorySummary(name=name))
            summary.count += 1
            summary.value += item.stock_value

        for category in self.state.categories.categories:
            if category.name not in summaries:
                summaries[category.name] = CategorySummary(name=category.name, is_custom=True)

        return list(summaries.values())

    def add_category(self, name: str) -> Category:
        """Add a custom category unless one with the same name exists."""
        name = (name or "").strip()
        if not name:
            raise ValueError("Please enter category name")

        wanted = name.lower()
        if any(summary.name.lower() == wanted for summary in self.category_summary()):
            raise ValueError("This category already exists")

        return self.state.categories.add_category(name)

    def delete_category(self, name: str) -> bool:
        """Delete a custom category that no item uses."""
        if self.state.inventory.items_in_category(name):
            raise ValueError("Cannot delete a category that still has products")

        category = self.state.categories.get_by_name(name)
        if category is None:
            raise ValueError("Category not found")

        return self.state.categories.delete_category(category.id)

    def add_supplier(
        self, name: str, contact: str | None = None, email: str | None = None
    ) -> Supplier:
        name = (name or "").strip()
        if not name:
            raise ValueError("Please enter supplier name")

        return self.state.suppliers.add_supplier(
            name, (contact or "").strip() or None, (email or "").strip() or None
        )

    def update_supplier(self, supplier_id: str, changes: dict[str, Any]) -> Supplier:
        if "name" in changes and not (changes["name"] or "").strip():
            raise ValueError("Please enter supplier name")

        supplier = self.state.suppliers.update_supplier(supplier_id, changes)
        if supplier is None:
            raise ValueError("Supplier not found")
        return supplier

    def delete_supplier(self, supplier_id: str) -> bool:
        return self.state.suppliers.delete_supplier(supplier_id)
