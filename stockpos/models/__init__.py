"""Data models for the inventory and POS state."""

from stockpos.models.alert import Alert, AlertLevel
from stockpos.models.cart import CartLine
from stockpos.models.catalog import Category, Supplier
from stockpos.models.inventory import (
    InventoryItem,
    ItemDraft,
    StockStatus,
    calculate_status,
)
from stockpos.models.order import OrderDraft, OrderLine, OrderStatus, PurchaseOrder
from stockpos.models.sales import PaymentMethod, Transaction, TransactionDraft
from stockpos.models.scan import ScanRecord

__all__ = [
    # Alerts
    "Alert",
    "AlertLevel",
    # Cart
    "CartLine",
    # Catalog
    "Category",
    "Supplier",
    # Inventory
    "InventoryItem",
    "ItemDraft",
    "StockStatus",
    "calculate_status",
    # Orders
    "OrderDraft",
    "OrderLine",
    "OrderStatus",
    "PurchaseOrder",
    # Sales
    "PaymentMethod",
    "Transaction",
    "TransactionDraft",
    # Scan
    "ScanRecord",
]
