"""Dashboard and report figures derived from the application state."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from stockpos.models.inventory import InventoryItem, StockStatus
from stockpos.state.manager import AppState
from stockpos.utils.clock import today as current_day

UNCATEGORIZED = "Uncategorized"


class CategoryBreakdown(BaseModel):
    """Stock figures for one category."""

    items: int = 0
    qty: int = 0
    value: Decimal = Decimal("0")


class DashboardStats(BaseModel):
    """Headline figures for the dashboard."""

    total_items: int
    total_stock: int
    stock_value: Decimal
    low_stock_count: int
    out_of_stock_count: int
    pending_orders: int
    total_sales: Decimal
    today_sales: Decimal
    transaction_count: int
    today_transaction_count: int
    total_items_sold: int
    today_items_sold: int
    avg_transaction_value: Decimal
    profit: Decimal
    today_profit: Decimal
    by_category: dict[str, CategoryBreakdown] = Field(default_factory=dict)


class InventorySummary(BaseModel):
    """Inventory summary report."""

    product_count: int
    total_value: Decimal
    total_cost: Decimal
    by_category: dict[str, CategoryBreakdown] = Field(default_factory=dict)


class ActivityEntry(BaseModel):
    """Audit log line."""

    id: str
    action: str
    details: str
    time: datetime


def category_breakdown(items: list[InventoryItem] | tuple[InventoryItem, ...]) -> dict[str, CategoryBreakdown]:
    breakdown: dict[str, CategoryBreakdown] = {}
    for item in items:
        entry = breakdown.setdefault(item.category or UNCATEGORIZED, CategoryBreakdown())
        entry.items += 1
        entry.qty += item.qty
        entry.value += item.stock_value
    return breakdown


def dashboard_stats(state: AppState, day: date | None = None) -> DashboardStats:
    day = day or current_day()
    inventory = state.inventory
    sales = state.sales
    todays = sales.today_transactions(day)

    return DashboardStats(
        total_items=inventory.total_items(),
        total_stock=inventory.total_stock(),
        stock_value=inventory.total_value(),
        low_stock_count=len(inventory.low_stock_items()),
        out_of_stock_count=len(inventory.out_of_stock_items()),
        pending_orders=len(state.orders.pending_orders()),
        total_sales=sales.total_sales(),
        today_sales=sales.today_sales(day),
        transaction_count=sales.transaction_count(),
        today_transaction_count=len(todays),
        total_items_sold=sales.items_sold(),
        today_items_sold=sum(len(t.items) for t in todays),
        avg_transaction_value=sales.average_transaction_value(),
        profit=sales.total_profit(),
        today_profit=sales.today_profit(day),
        by_category=category_breakdown(inventory.items),
    )


def inventory_summary(state: AppState) -> InventorySummary:
    inventory = state.inventory
    return InventorySummary(
        product_count=inventory.total_items(),
        total_value=inventory.total_value(),
        total_cost=inventory.total_cost(),
        by_category=category_breakdown(inventory.items),
    )


def low_stock_report(state: AppState) -> list[InventoryItem]:
    """Items needing attention, out of stock first."""
    items = state.inventory.items
    return [i for i in items if i.status == StockStatus.DANGER] + [
        i for i in items if i.status == StockStatus.WARNING
    ]


def recent_activity(state: AppState, limit: int = 5) -> list[ActivityEntry]:
    """Most recent sales as audit entries."""
    return [
        ActivityEntry(
            id=t.id,
            action="Sale completed",
            details=f"{t.total:.2f} - {len(t.items)} items",
            time=t.date,
        )
        for t in state.sales.transactions[:limit]
    ]
