"""Completed sale models."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from stockpos.models.cart import CartLine


class PaymentMethod(str, Enum):
    """Accepted payment methods."""

    CASH = "cash"
    CARD = "card"


class TransactionDraft(BaseModel):
    """Checkout data handed to the sales log."""

    items: list[CartLine] = Field(default_factory=list)
    discount: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    cost: Decimal | None = None
    profit: Decimal | None = None
    payment_method: PaymentMethod = PaymentMethod.CASH
    amount_received: Decimal = Decimal("0")
    change: Decimal = Decimal("0")

    @model_validator(mode="after")
    def fill_profit(self) -> "TransactionDraft":
        """Derive profit from total and cost when not given."""
        if self.profit is None and self.cost is not None:
            self.profit = self.total - self.cost
        return self


class Transaction(BaseModel):
    """Recorded sale. Never modified after creation."""

    model_config = ConfigDict(frozen=True)

    id: str
    items: tuple[CartLine, ...] = ()
    discount: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    cost: Decimal | None = None
    profit: Decimal | None = None
    payment_method: PaymentMethod = PaymentMethod.CASH
    amount_received: Decimal = Decimal("0")
    change: Decimal = Decimal("0")
    date: datetime

    @property
    def realized_profit(self) -> Decimal:
        """Profit of the sale, preferring total minus cost."""
        if self.cost is not None:
            return self.total - self.cost
        if self.profit is not None:
            return self.profit
        return self.total
