"""Cart store: the in-progress sale."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any

from stockpos.models.cart import CartLine
from stockpos.models.inventory import InventoryItem
from stockpos.utils.logging import get_logger
from stockpos.utils.parsing import parse_amount

logger = get_logger(__name__)

HUNDRED = Decimal("100")


def subtotal(lines: Iterable[CartLine]) -> Decimal:
    """Sum of qty * price over the lines."""
    return sum((line.line_total for line in lines), Decimal("0"))


def tax(lines: Iterable[CartLine], tax_rate: Decimal) -> Decimal:
    """Tax charged on the subtotal."""
    return subtotal(lines) * tax_rate


def discount_amount(lines: Iterable[CartLine], discount: Decimal) -> Decimal:
    """Discount percentage applied to the subtotal."""
    return subtotal(lines) * (discount / HUNDRED)


def total(lines: Sequence[CartLine], discount: Decimal, tax_rate: Decimal) -> Decimal:
    """Subtotal plus tax minus discount."""
    base = subtotal(lines)
    return base + base * tax_rate - base * (discount / HUNDRED)


def item_count(lines: Iterable[CartLine]) -> int:
    """Units in the cart."""
    return sum(line.qty for line in lines)


def total_cost(lines: Iterable[CartLine]) -> Decimal:
    """Acquisition cost of the cart contents."""
    return sum((line.line_cost for line in lines), Decimal("0"))


class CartStore:
    """Owns the cart lines, the discount and the customer."""

    def __init__(self, tax_rate: Decimal = Decimal("0.10")) -> None:
        self.tax_rate = tax_rate
        self._lines: list[CartLine] = []
        self.discount: Decimal = Decimal("0")
        self.customer: str | None = None

    @property
    def items(self) -> Sequence[CartLine]:
        """Cart lines in the order they were added."""
        return tuple(self._lines)

    def get_line(self, item_id: str) -> CartLine | None:
        return next((line for line in self._lines if line.item_id == item_id), None)

    def add_to_cart(self, product: CartLine | InventoryItem) -> CartLine:
        """
        Add one unit of a product.

        A repeat add increments the existing line. Stock availability is not
        checked here.
        """
        line = CartLine.from_item(product) if isinstance(product, InventoryItem) else product

        for index, existing in enumerate(self._lines):
            if existing.item_id == line.item_id:
                merged = existing.model_copy(update={"qty": existing.qty + 1})
                self._lines[index] = merged
                logger.debug("cart_line_incremented", item_id=line.item_id, qty=merged.qty)
                return merged

        if line.qty != 1:
            line = line.model_copy(update={"qty": 1})
        self._lines.append(line)
        logger.debug("cart_line_added", item_id=line.item_id)
        return line

    def remove_from_cart(self, item_id: str) -> bool:
        """Drop a line. Returns False if no such line."""
        before = len(self._lines)
        self._lines = [line for line in self._lines if line.item_id != item_id]
        removed = len(self._lines) < before
        if removed:
            logger.debug("cart_line_removed", item_id=item_id)
        return removed

    def update_quantity(self, item_id: str, qty: int) -> CartLine | None:
        """
        Set a line's quantity.

        A quantity of zero or less removes the line; returns None in that
        case or when the line does not exist.
        """
        if qty <= 0:
            self.remove_from_cart(item_id)
            return None

        for index, line in enumerate(self._lines):
            if line.item_id == item_id:
                updated = line.model_copy(update={"qty": qty})
                self._lines[index] = updated
                logger.debug("cart_quantity_updated", item_id=item_id, qty=qty)
                return updated
        return None

    def set_discount(self, discount: Any) -> None:
        """
        Store the discount percentage as given; range checks are the caller's.

        Non-numeric input is stored as 0.
        """
        self.discount = parse_amount(discount)

    def set_customer(self, customer: str | None) -> None:
        self.customer = customer

    def clear_cart(self) -> None:
        """Reset lines, discount and customer together."""
        self._lines = []
        self.discount = Decimal("0")
        self.customer = None
        logger.debug("cart_cleared")

    # Derived values

    def subtotal(self) -> Decimal:
        return subtotal(self._lines)

    def tax(self) -> Decimal:
        return tax(self._lines, self.tax_rate)

    def discount_amount(self) -> Decimal:
        return discount_amount(self._lines, self.discount)

    def total(self) -> Decimal:
        return total(self._lines, self.discount, self.tax_rate)

    def item_count(self) -> int:
        return item_count(self._lines)

    def total_cost(self) -> Decimal:
        return total_cost(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    # Serialization

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready copy of the store."""
        return {
            "items": [line.model_dump(mode="json") for line in self._lines],
            "discount": str(self.discount),
            "customer": self.customer,
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Replace the store contents from a snapshot."""
        self._lines = [CartLine.model_validate(raw) for raw in data.get("items", [])]
        self.discount = Decimal(str(data.get("discount", "0")))
        self.customer = data.get("customer")

    def reset(self) -> None:
        self.clear_cart()
