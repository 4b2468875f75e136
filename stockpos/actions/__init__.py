"""UI actions orchestrating the stores."""

from stockpos.actions.alerts import AlertActions
from stockpos.actions.base import ActionResult, BaseAction
from stockpos.actions.catalog import CatalogActions
from stockpos.actions.inventory import InventoryActions
from stockpos.actions.pos import CheckoutCommand, PosActions
from stockpos.actions.receiving import ReceivingActions
from stockpos.actions.scanning import ScanActions

__all__ = [
    "ActionResult",
    "BaseAction",
    "AlertActions",
    "CatalogActions",
    "CheckoutCommand",
    "InventoryActions",
    "PosActions",
    "ReceivingActions",
    "ScanActions",
]
