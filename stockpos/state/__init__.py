"""State stores."""

from stockpos.state.alerts import AlertsStore
from stockpos.state.cart import CartStore
from stockpos.state.catalog import CategoriesStore, SuppliersStore
from stockpos.state.inventory import InventoryStore
from stockpos.state.manager import AppState
from stockpos.state.orders import OrdersStore
from stockpos.state.sales import SalesStore
from stockpos.state.scan import ScanStore

__all__ = [
    "AppState",
    "AlertsStore",
    "CartStore",
    "CategoriesStore",
    "InventoryStore",
    "OrdersStore",
    "SalesStore",
    "ScanStore",
    "SuppliersStore",
]
