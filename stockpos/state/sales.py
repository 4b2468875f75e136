"""Sales store: the append-only transaction log."""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from typing import Any

from stockpos.models.sales import Transaction, TransactionDraft
from stockpos.utils.clock import epoch_millis, local_day, now, today
from stockpos.utils.logging import get_logger

logger = get_logger(__name__)


def transactions_on(transactions: Iterable[Transaction], day: date) -> list[Transaction]:
    """Transactions recorded on a local calendar day."""
    return [t for t in transactions if local_day(t.date) == day]


def total_sales(transactions: Iterable[Transaction]) -> Decimal:
    return sum((t.total for t in transactions), Decimal("0"))


def total_profit(transactions: Iterable[Transaction]) -> Decimal:
    """Per transaction total minus cost, falling back to the stored profit."""
    return sum((t.realized_profit for t in transactions), Decimal("0"))


def sales_by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Sale value per category over the snapshotted lines."""
    sales: dict[str, Decimal] = defaultdict(lambda: Decimal("0"))
    for transaction in transactions:
        for line in transaction.items:
            sales[line.category or "Other"] += line.line_total
    return dict(sales)


def items_sold(transactions: Iterable[Transaction]) -> int:
    """Number of distinct lines sold."""
    return sum(len(t.items) for t in transactions)


def average_transaction_value(transactions: Sequence[Transaction]) -> Decimal:
    if not transactions:
        return Decimal("0")
    return total_sales(transactions) / len(transactions)


class SalesStore:
    """Owns completed transactions, most recent first."""

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []
        self._last_millis = 0

    @property
    def transactions(self) -> Sequence[Transaction]:
        return tuple(self._transactions)

    def _next_id(self) -> str:
        # Two sales in the same millisecond still get distinct ids.
        millis = max(epoch_millis(), self._last_millis + 1)
        self._last_millis = millis
        return f"TXN-{millis}"

    def add_transaction(self, draft: TransactionDraft | dict[str, Any]) -> Transaction:
        """Record a sale. Line items are copied so later changes never leak in."""
        if isinstance(draft, dict):
            draft = TransactionDraft.model_validate(draft)

        transaction = Transaction(
            id=self._next_id(),
            items=tuple(line.model_copy(deep=True) for line in draft.items),
            discount=draft.discount,
            total=draft.total,
            cost=draft.cost,
            profit=draft.profit,
            payment_method=draft.payment_method,
            amount_received=draft.amount_received,
            change=draft.change,
            date=now(),
        )
        self._transactions.insert(0, transaction)

        logger.debug(
            "transaction_recorded",
            transaction_id=transaction.id,
            total=str(transaction.total),
            lines=len(transaction.items),
        )
        return transaction

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        return next((t for t in self._transactions if t.id == transaction_id), None)

    def clear(self) -> None:
        """Drop the whole log. Only used for a full session reset."""
        self._transactions = []
        logger.debug("transactions_cleared")

    # Derived values

    def today_transactions(self, day: date | None = None) -> list[Transaction]:
        return transactions_on(self._transactions, day or today())

    def today_sales(self, day: date | None = None) -> Decimal:
        return total_sales(self.today_transactions(day))

    def today_profit(self, day: date | None = None) -> Decimal:
        return total_profit(self.today_transactions(day))

    def total_sales(self) -> Decimal:
        return total_sales(self._transactions)

    def total_profit(self) -> Decimal:
        return total_profit(self._transactions)

    def transaction_count(self) -> int:
        return len(self._transactions)

    def sales_by_category(self) -> dict[str, Decimal]:
        return sales_by_category(self._transactions)

    def items_sold(self) -> int:
        return items_sold(self._transactions)

    def average_transaction_value(self) -> Decimal:
        return average_transaction_value(self._transactions)

    # Serialization

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready copy of the store."""
        return {
            "transactions": [t.model_dump(mode="json") for t in self._transactions],
            "last_millis": self._last_millis,
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Replace the store contents from a snapshot."""
        self._transactions = [
            Transaction.model_validate(raw) for raw in data.get("transactions", [])
        ]
        self._last_millis = int(data.get("last_millis", 0))

    def reset(self) -> None:
        self.clear()
        self._last_millis = 0
