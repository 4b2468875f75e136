"""Inventory store: the catalog of stock items."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any, Literal

from stockpos.models.inventory import InventoryItem, ItemDraft, StockStatus
from stockpos.utils.clock import now
from stockpos.utils.logging import get_logger
from stockpos.utils.parsing import parse_amount, parse_quantity

logger = get_logger(__name__)

StockDirection = Literal["in", "out"]

# Fields a patch may never overwrite.
_PROTECTED_FIELDS = frozenset({"id", "created_at", "status"})

_AMOUNT_FIELDS = ("price", "cost")
_COUNT_FIELDS = ("qty", "min_qty")


def _floor_numbers(fields: dict[str, Any]) -> dict[str, Any]:
    """Floor money and count fields at zero; unparseable values are dropped."""
    cleaned = dict(fields)
    for key in _AMOUNT_FIELDS:
        if key in cleaned:
            amount = parse_amount(cleaned.pop(key), default=None)
            if amount is not None:
                cleaned[key] = max(amount, Decimal("0"))
    for key in _COUNT_FIELDS:
        if key in cleaned:
            count = parse_quantity(cleaned.pop(key), default=None)
            if count is not None:
                cleaned[key] = max(count, 0)
    return cleaned


def total_stock(items: Iterable[InventoryItem]) -> int:
    """Units on hand across all items."""
    return sum(item.qty for item in items)


def total_value(items: Iterable[InventoryItem]) -> Decimal:
    """Sale value of all stock."""
    return sum((item.stock_value for item in items), Decimal("0"))


def total_cost(items: Iterable[InventoryItem]) -> Decimal:
    """Acquisition value of all stock."""
    return sum((item.cost_value for item in items), Decimal("0"))


def items_with_status(
    items: Iterable[InventoryItem], status: StockStatus
) -> list[InventoryItem]:
    """Items currently in the given stock status."""
    return [item for item in items if item.status == status]


def distinct_categories(items: Iterable[InventoryItem]) -> list[str]:
    """Categories in first-seen order, blanks dropped."""
    seen: dict[str, None] = {}
    for item in items:
        if item.category:
            seen.setdefault(item.category, None)
    return list(seen)


def search_items(
    items: Iterable[InventoryItem],
    query: str = "",
    category: str | None = None,
    in_stock_only: bool = False,
) -> list[InventoryItem]:
    """
    Filter items the way the POS product grid does.

    Name and SKU match case-insensitively on a substring; barcodes match on
    the raw substring.
    """
    query = query.strip()
    needle = query.lower()
    result = []
    for item in items:
        if in_stock_only and item.qty <= 0:
            continue
        if category and item.category != category:
            continue
        if query and not (
            needle in item.name.lower()
            or (item.sku and needle in item.sku.lower())
            or (item.barcode and query in item.barcode)
        ):
            continue
        result.append(item)
    return result


class InventoryStore:
    """Owns the catalog; recomputes stock status on every mutation."""

    def __init__(self, default_category: str = "Other") -> None:
        self.default_category = default_category
        self._items: list[InventoryItem] = []

    @property
    def items(self) -> Sequence[InventoryItem]:
        """Items in insertion order."""
        return tuple(self._items)

    def _index(self, item_id: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def add_item(self, draft: ItemDraft | dict[str, Any]) -> InventoryItem:
        """
        Create an item from a draft.

        Missing or unparseable numeric fields default to 0, negative ones are
        floored at 0 and a missing category takes the store default. No
        duplicate check is made on name or barcode.
        """
        if isinstance(draft, dict):
            draft = ItemDraft.model_validate(_floor_numbers(draft))

        item = InventoryItem(
            name=draft.name,
            barcode=draft.barcode,
            sku=draft.sku,
            category=draft.category or self.default_category,
            price=draft.price or Decimal("0"),
            cost=draft.cost or Decimal("0"),
            qty=draft.qty or 0,
            min_qty=draft.min_qty or 0,
            location=draft.location,
            description=draft.description,
            created_at=now(),
        )
        self._items.append(item)

        logger.debug("item_added", item_id=item.id, name=item.name, status=item.status)
        return item

    def update_item(self, item_id: str, patch: dict[str, Any]) -> InventoryItem | None:
        """
        Merge patch fields into an item. Returns None if the id is unknown.

        Negative numbers are floored at 0; unparseable ones leave the field as is.
        """
        index = self._index(item_id)
        if index is None:
            logger.debug("item_not_found", item_id=item_id, operation="update")
            return None

        current = self._items[index]
        changes = _floor_numbers(
            {k: v for k, v in patch.items() if k not in _PROTECTED_FIELDS}
        )
        updated = InventoryItem.model_validate({**current.model_dump(), **changes})
        self._items[index] = updated

        logger.debug(
            "item_updated",
            item_id=item_id,
            fields=sorted(changes),
            status=updated.status,
        )
        return updated

    def adjust_stock(
        self, item_id: str, quantity: int, direction: StockDirection
    ) -> InventoryItem | None:
        """
        Stock an item in or out.

        The resulting quantity is floored at zero; an over-draw is not
        rejected here. Returns None if the id is unknown.
        """
        if direction not in ("in", "out"):
            raise ValueError(f"Unknown stock direction: {direction!r}")

        index = self._index(item_id)
        if index is None:
            logger.debug("item_not_found", item_id=item_id, operation="adjust_stock")
            return None

        current = self._items[index]
        new_qty = current.qty + quantity if direction == "in" else current.qty - quantity
        updated = current.model_copy(update={"qty": max(0, new_qty)})
        self._items[index] = updated

        logger.debug(
            "stock_adjusted",
            item_id=item_id,
            direction=direction,
            quantity=quantity,
            new_qty=updated.qty,
            status=updated.status,
        )
        return updated

    def delete_item(self, item_id: str) -> bool:
        """Remove an item. Returns False if it was not present."""
        index = self._index(item_id)
        if index is None:
            return False
        del self._items[index]
        logger.debug("item_deleted", item_id=item_id)
        return True

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()
        logger.debug("inventory_cleared")

    # Lookups

    def get_item(self, item_id: str) -> InventoryItem | None:
        """Find an item by id."""
        index = self._index(item_id)
        return None if index is None else self._items[index]

    def get_item_by_barcode(self, barcode: str) -> InventoryItem | None:
        """Find the first item with exactly this barcode."""
        return next((item for item in self._items if item.barcode == barcode), None)

    def get_item_by_sku(self, sku: str) -> InventoryItem | None:
        """Find the first item whose SKU matches, ignoring case."""
        wanted = sku.lower()
        return next(
            (item for item in self._items if item.sku and item.sku.lower() == wanted),
            None,
        )

    def find_by_name(self, name: str) -> InventoryItem | None:
        """Find the first item whose name matches, ignoring case."""
        wanted = name.strip().lower()
        return next(
            (item for item in self._items if item.name.lower() == wanted), None
        )

    # Aggregates

    def total_items(self) -> int:
        return len(self._items)

    def total_stock(self) -> int:
        return total_stock(self._items)

    def total_value(self) -> Decimal:
        return total_value(self._items)

    def total_cost(self) -> Decimal:
        return total_cost(self._items)

    def items_with_status(self, status: StockStatus) -> list[InventoryItem]:
        return items_with_status(self._items, status)

    def low_stock_items(self) -> list[InventoryItem]:
        return items_with_status(self._items, StockStatus.WARNING)

    def out_of_stock_items(self) -> list[InventoryItem]:
        return items_with_status(self._items, StockStatus.DANGER)

    def categories(self) -> list[str]:
        return distinct_categories(self._items)

    def items_in_category(self, category: str) -> list[InventoryItem]:
        return [item for item in self._items if item.category == category]

    def search(
        self,
        query: str = "",
        category: str | None = None,
        in_stock_only: bool = False,
    ) -> list[InventoryItem]:
        return search_items(self._items, query, category, in_stock_only)

    # Serialization

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready copy of the store."""
        return {"items": [item.model_dump(mode="json") for item in self._items]}

    def restore(self, data: dict[str, Any]) -> None:
        """Replace the store contents from a snapshot."""
        self._items = [InventoryItem.model_validate(raw) for raw in data.get("items", [])]

    def reset(self) -> None:
        self.clear()
