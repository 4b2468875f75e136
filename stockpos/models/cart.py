"""Point of sale cart models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from stockpos.models.inventory import InventoryItem


class CartLine(BaseModel):
    """A single product entry in the cart."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    name: str
    category: str = "Other"
    price: Decimal = Field(default=Decimal("0"), ge=0)
    cost: Decimal = Field(default=Decimal("0"), ge=0)
    qty: int = Field(default=1, ge=1)

    @classmethod
    def from_item(cls, item: InventoryItem) -> "CartLine":
        """Build a single-unit line from a catalog item."""
        return cls(
            item_id=item.id,
            name=item.name,
            category=item.category,
            price=item.price,
            cost=item.cost,
            qty=1,
        )

    @property
    def line_total(self) -> Decimal:
        """Sale value of the line."""
        return self.price * self.qty

    @property
    def line_cost(self) -> Decimal:
        """Acquisition cost of the line."""
        return self.cost * self.qty
