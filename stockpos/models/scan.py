"""Barcode scan models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from stockpos.models.inventory import InventoryItem
from stockpos.utils.clock import now


class ScanRecord(BaseModel):
    """Snapshot of an item at the moment it was scanned."""

    model_config = ConfigDict(frozen=True)

    item: InventoryItem
    scanned_at: datetime = Field(default_factory=now)
