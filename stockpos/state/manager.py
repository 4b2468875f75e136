"""Application state container owning every store."""

import json
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Protocol

from stockpos.config import Settings, get_settings
from stockpos.state.alerts import AlertsStore
from stockpos.state.cart import CartStore
from stockpos.state.catalog import CategoriesStore, SuppliersStore
from stockpos.state.inventory import InventoryStore
from stockpos.state.orders import OrdersStore
from stockpos.state.sales import SalesStore
from stockpos.state.scan import ScanStore
from stockpos.utils.logging import get_logger
from stockpos.utils.tracing import ActionTracer

logger = get_logger(__name__)

SNAPSHOT_VERSION = 1


class Store(Protocol):
    """Serialization surface shared by every store."""

    def snapshot(self) -> dict[str, Any]: ...

    def restore(self, data: dict[str, Any]) -> None: ...

    def reset(self) -> None: ...


class AppState:
    """
    Explicitly constructed state for one application instance.

    Stores never reach into each other; cross-store sequences are run by the
    actions layer, optionally inside ``atomic``.
    """

    STORE_NAMES = (
        "inventory",
        "cart",
        "sales",
        "orders",
        "alerts",
        "scan",
        "suppliers",
        "categories",
    )

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.inventory = InventoryStore(default_category=self.settings.default_category)
        self.cart = CartStore(tax_rate=self.settings.tax_rate)
        self.sales = SalesStore()
        self.orders = OrdersStore(first_order_number=self.settings.first_order_number)
        self.alerts = AlertsStore()
        self.scan = ScanStore(history_limit=self.settings.scan_history_limit)
        self.suppliers = SuppliersStore()
        self.categories = CategoriesStore()
        self.tracer = ActionTracer(max_events=self.settings.trace_history_limit)
        self.started = False

    def store(self, name: str) -> Store:
        """Look up a store by name."""
        if name not in self.STORE_NAMES:
            raise KeyError(f"Unknown store: {name}")
        return getattr(self, name)

    def start(self) -> None:
        """Mark the state as live."""
        self.started = True
        logger.info("app_state_started", environment=self.settings.environment)

    def stop(self) -> None:
        """End the session. State is ephemeral and is not written anywhere."""
        self.started = False
        trace = self.tracer.get_trace_summary()
        logger.info(
            "app_state_stopped",
            items=self.inventory.total_items(),
            transactions=self.sales.transaction_count(),
            traced_actions=trace["total_events"],
            action_stats=trace["action_stats"],
        )

    def reset(self) -> None:
        """Clear every store."""
        for name in self.STORE_NAMES:
            self.store(name).reset()
        logger.info("app_state_reset")

    @contextmanager
    def atomic(self, *names: str) -> Generator[None, None, None]:
        """
        All-or-nothing block over the named stores (all stores if none given).

        Each store is snapshotted on entry and restored if the block raises;
        the exception is then re-raised.
        """
        names = names or self.STORE_NAMES
        saved = {name: self.store(name).snapshot() for name in names}
        try:
            yield
        except Exception:
            for name, data in saved.items():
                self.store(name).restore(data)
            logger.warning("atomic_block_rolled_back", stores=list(names))
            raise

    # Serialization

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready copy of every store."""
        data: dict[str, Any] = {"version": SNAPSHOT_VERSION}
        for name in self.STORE_NAMES:
            data[name] = self.store(name).snapshot()
        return data

    def restore(self, data: dict[str, Any]) -> None:
        """Replace every store present in the snapshot."""
        version = data.get("version", SNAPSHOT_VERSION)
        if version != SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported snapshot version: {version}")

        for name in self.STORE_NAMES:
            if name in data:
                self.store(name).restore(data[name])
        logger.debug("app_state_restored")

    def to_json(self) -> str:
        return json.dumps(self.snapshot())

    @classmethod
    def from_json(cls, payload: str, settings: Settings | None = None) -> "AppState":
        state = cls(settings)
        state.restore(json.loads(payload))
        return state
