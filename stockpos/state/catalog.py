"""Suppliers and custom categories."""

from collections.abc import Sequence
from typing import Any

from stockpos.models.catalog import Category, Supplier
from stockpos.utils.logging import get_logger

logger = get_logger(__name__)

_PROTECTED_FIELDS = frozenset({"id", "created_at"})


class SuppliersStore:
    """Owns supplier contacts in insertion order."""

    def __init__(self) -> None:
        self._suppliers: list[Supplier] = []

    @property
    def suppliers(self) -> Sequence[Supplier]:
        return tuple(self._suppliers)

    def add_supplier(
        self, name: str, contact: str | None = None, email: str | None = None
    ) -> Supplier:
        supplier = Supplier(name=name, contact=contact, email=email)
        self._suppliers.append(supplier)
        logger.debug("supplier_added", supplier_id=supplier.id, name=name)
        return supplier

    def update_supplier(self, supplier_id: str, patch: dict[str, Any]) -> Supplier | None:
        for index, supplier in enumerate(self._suppliers):
            if supplier.id == supplier_id:
                changes = {k: v for k, v in patch.items() if k not in _PROTECTED_FIELDS}
                updated = Supplier.model_validate({**supplier.model_dump(), **changes})
                self._suppliers[index] = updated
                return updated
        logger.debug("supplier_not_found", supplier_id=supplier_id)
        return None

    def delete_supplier(self, supplier_id: str) -> bool:
        before = len(self._suppliers)
        self._suppliers = [s for s in self._suppliers if s.id != supplier_id]
        return len(self._suppliers) < before

    def get_supplier(self, supplier_id: str) -> Supplier | None:
        return next((s for s in self._suppliers if s.id == supplier_id), None)

    def snapshot(self) -> dict[str, Any]:
        return {"suppliers": [s.model_dump(mode="json") for s in self._suppliers]}

    def restore(self, data: dict[str, Any]) -> None:
        self._suppliers = [Supplier.model_validate(raw) for raw in data.get("suppliers", [])]

    def reset(self) -> None:
        self._suppliers = []


class CategoriesStore:
    """Owns user-defined categories in insertion order."""

    def __init__(self) -> None:
        self._categories: list[Category] = []

    @property
    def categories(self) -> Sequence[Category]:
        return tuple(self._categories)

    def add_category(self, name: str) -> Category:
        category = Category(name=name)
        self._categories.append(category)
        logger.debug("category_added", category_id=category.id, name=name)
        return category

    def delete_category(self, category_id: str) -> bool:
        before = len(self._categories)
        self._categories = [c for c in self._categories if c.id != category_id]
        return len(self._categories) < before

    def get_by_name(self, name: str) -> Category | None:
        wanted = name.strip().lower()
        return next((c for c in self._categories if c.name.lower() == wanted), None)

    def snapshot(self) -> dict[str, Any]:
        return {"categories": [c.model_dump(mode="json") for c in self._categories]}

    def restore(self, data: dict[str, Any]) -> None:
        self._categories = [
            Category.model_validate(raw) for raw in data.get("categories", [])
        ]

    def reset(self) -> None:
        self._categories = []
