"""Inventory item models and stock status derivation."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

from stockpos.utils.clock import now


class StockStatus(str, Enum):
    """Availability classification of an item."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


def calculate_status(qty: int, min_qty: int) -> StockStatus:
    """Derive the stock status from quantity on hand and reorder threshold."""
    if qty == 0:
        return StockStatus.DANGER
    if qty < min_qty:
        return StockStatus.WARNING
    return StockStatus.SUCCESS


class ItemDraft(BaseModel):
    """Fields supplied when creating an item."""

    name: str
    barcode: str | None = None
    sku: str | None = None
    category: str | None = None
    price: Decimal | None = Field(default=None, ge=0)
    cost: Decimal | None = Field(default=None, ge=0)
    qty: int | None = Field(default=None, ge=0)
    min_qty: int | None = Field(default=None, ge=0)
    location: str | None = None
    description: str | None = None


class InventoryItem(BaseModel):
    """Catalog item with stock levels."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    barcode: str | None = None
    sku: str | None = None
    category: str = "Other"
    price: Decimal = Field(default=Decimal("0"), ge=0)
    cost: Decimal = Field(default=Decimal("0"), ge=0)
    qty: int = Field(default=0, ge=0)
    min_qty: int = Field(default=0, ge=0)
    location: str | None = None
    description: str | None = None
    created_at: datetime = Field(default_factory=now)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> StockStatus:
        """Stock status, always derived from qty and min_qty."""
        return calculate_status(self.qty, self.min_qty)

    @property
    def stock_value(self) -> Decimal:
        """Sale value of the units on hand."""
        return self.price * self.qty

    @property
    def cost_value(self) -> Decimal:
        """Acquisition value of the units on hand."""
        return self.cost * self.qty

    @property
    def is_available(self) -> bool:
        """Check if item is available."""
        return self.qty > 0
