"""Scan store: last scanned item and bounded scan history."""

from collections.abc import Sequence
from typing import Any

from stockpos.models.inventory import InventoryItem
from stockpos.models.scan import ScanRecord
from stockpos.utils.logging import get_logger

logger = get_logger(__name__)


class ScanStore:
    """Owns the last scanned snapshot and the most-recent-first history."""

    def __init__(self, history_limit: int = 50) -> None:
        self.history_limit = history_limit
        self.last_scanned: InventoryItem | None = None
        self._history: list[ScanRecord] = []

    @property
    def history(self) -> Sequence[ScanRecord]:
        return tuple(self._history)

    def set_last_scanned(self, item: InventoryItem | None) -> ScanRecord | None:
        """
        Record a scan.

        The item is prepended to the history, which is truncated to the
        limit. Passing None clears the pointer and leaves the history alone.
        """
        self.last_scanned = item
        if item is None:
            return None

        record = ScanRecord(item=item)
        self._history = [record, *self._history][: self.history_limit]
        logger.debug("item_scanned", item_id=item.id, history=len(self._history))
        return record

    def refresh_last_scanned(self, item: InventoryItem | None) -> None:
        """Replace the pointer without adding a history entry."""
        self.last_scanned = item

    def clear_history(self) -> None:
        self._history = []
        self.last_scanned = None
        logger.debug("scan_history_cleared")

    # Serialization

    def snapshot(self) -> dict[str, Any]:
        return {
            "last_scanned": (
                self.last_scanned.model_dump(mode="json") if self.last_scanned else None
            ),
            "history": [r.model_dump(mode="json") for r in self._history],
        }

    def restore(self, data: dict[str, Any]) -> None:
        raw_last = data.get("last_scanned")
        self.last_scanned = InventoryItem.model_validate(raw_last) if raw_last else None
        self._history = [ScanRecord.model_validate(raw) for raw in data.get("history", [])]

    def reset(self) -> None:
        self.clear_history()
