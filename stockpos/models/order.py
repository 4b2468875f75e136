"""Purchase order and receiving models."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class OrderStatus(str, Enum):
    """Purchase order status."""

    PENDING = "pending"
    RECEIVED = "received"
    CANCELLED = "cancelled"


class OrderLine(BaseModel):
    """Product line on a purchase order."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    product_name: str
    quantity: int = Field(ge=1)
    unit_price: Decimal = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_price(self) -> Decimal:
        """Line value."""
        return self.unit_price * self.quantity


class OrderDraft(BaseModel):
    """Fields supplied when recording a purchase order."""

    supplier: str | None = None
    lines: list[OrderLine] = Field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    total: Decimal | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def fill_total(self) -> "OrderDraft":
        """Default the order total to the sum of its lines."""
        if self.total is None:
            self.total = sum((line.total_price for line in self.lines), Decimal("0"))
        return self


class PurchaseOrder(BaseModel):
    """Purchase order or receiving record."""

    model_config = ConfigDict(frozen=True)

    id: str
    supplier: str | None = None
    lines: tuple[OrderLine, ...] = ()
    status: OrderStatus = OrderStatus.PENDING
    total: Decimal = Decimal("0")
    notes: str | None = None
    created_at: datetime
    updated_at: datetime | None = None

    @property
    def is_received(self) -> bool:
        """Check if the goods have been received."""
        return self.status == OrderStatus.RECEIVED

    @property
    def total_quantity(self) -> int:
        """Units across all lines."""
        return sum(line.quantity for line in self.lines)
