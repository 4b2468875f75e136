"""POS actions: cart building and checkout."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from stockpos.actions.base import BaseAction
from stockpos.models.cart import CartLine
from stockpos.models.inventory import InventoryItem
from stockpos.models.sales import PaymentMethod, Transaction, TransactionDraft
from stockpos.state.manager import AppState
from stockpos.utils.parsing import parse_amount
from stockpos.utils.tracing import ActionTracer


class CheckoutPlan(BaseModel):
    """Validated checkout, ready to apply."""

    lines: list[CartLine]
    payment_method: PaymentMethod
    subtotal: Decimal
    tax: Decimal
    discount_amount: Decimal
    total: Decimal
    cost: Decimal
    amount_received: Decimal
    change: Decimal


class CheckoutCommand:
    """
    Checkout as a single command.

    ``plan`` validates everything up front; ``apply`` stocks out each line,
    records the transaction and clears the cart inside one atomic block, so
    either all three effects happen or none do.
    """

    def __init__(self, state: AppState):
        self.state = state

    def plan(
        self,
        payment_method: PaymentMethod | str,
        amount_received: Any = None,
    ) -> CheckoutPlan:
        cart = self.state.cart
        if cart.is_empty():
            raise ValueError("Please add items to cart first")

        method = PaymentMethod(payment_method)
        total = cart.total()

        if method == PaymentMethod.CASH:
            received = parse_amount(amount_received, default=None)
            if received is None or received < total:
                raise ValueError("Amount received must be at least the total amount")
            change = received - total
        else:
            received = total
            change = Decimal("0")

        for line in cart.items:
            item = self.state.inventory.get_item(line.item_id)
            if item is None:
                raise ValueError(f"{line.name} is no longer in inventory")
            if line.qty > item.qty:
                raise ValueError(f"Only {item.qty} {item.name} available in stock")

        return CheckoutPlan(
            lines=list(cart.items),
            payment_method=method,
            subtotal=cart.subtotal(),
            tax=cart.tax(),
            discount_amount=cart.discount_amount(),
            total=total,
            cost=cart.total_cost(),
            amount_received=received,
            change=change,
        )

    def apply(self, plan: CheckoutPlan) -> Transaction:
        with self.state.atomic("inventory", "sales", "cart"):
            for line in plan.lines:
                self.state.inventory.adjust_stock(line.item_id, line.qty, "out")

            transaction = self.state.sales.add_transaction(
                TransactionDraft(
                    items=plan.lines,
                    discount=plan.discount_amount,
                    total=plan.total,
                    cost=plan.cost,
                    profit=plan.total - plan.cost,
                    payment_method=plan.payment_method,
                    amount_received=plan.amount_received,
                    change=plan.change,
                )
            )

            self.state.cart.clear_cart()
        return transaction


class PosActions(BaseAction):
    """
    Point of sale actions.

    Responsibilities:
    - Keep cart quantities within available stock
    - Validate the discount range
    - Run checkout as one all-or-nothing command
    """

    def __init__(self, state: AppState, tracer: ActionTracer | None = None):
        super().__init__("pos", state, tracer)
        self.register_actions()

    def register_actions(self) -> None:
        """Register POS actions."""
        self.register_action("browse", self.browse)
        self.register_action("add_to_cart", self.add_to_cart)
        self.register_action("change_quantity", self.change_quantity)
        self.register_action("remove_from_cart", self.remove_from_cart)
        self.register_action("apply_discount", self.apply_discount)
        self.register_action("set_customer", self.set_customer)
        self.register_action("checkout", self.checkout)

    def _require_item(self, item_id: str) -> InventoryItem:
        item = self.state.inventory.get_item(item_id)
        if item is None:
            raise ValueError("Item not found")
        return item

    def browse(self, query: str = "", category: str | None = None) -> list[InventoryItem]:
        """In-stock products, optionally filtered; "All" means no category filter."""
        if category == "All":
            category = None
        return self.state.inventory.search(query, category, in_stock_only=True)

    def add_to_cart(self, item_id: str) -> CartLine:
        """Add one unit, refusing to exceed the stock on hand."""
        item = self._require_item(item_id)
        line = self.state.cart.get_line(item_id)
        in_cart = line.qty if line else 0

        if in_cart >= item.qty:
            raise ValueError(f"Only {item.qty} available in stock")

        return self.state.cart.add_to_cart(item)

    def change_quantity(self, item_id: str, delta: int) -> CartLine | None:
        """Step a line's quantity; dropping to zero removes it."""
        line = self.state.cart.get_line(item_id)
        if line is None:
            raise ValueError("Item is not in the cart")

        new_qty = line.qty + delta
        item = self._require_item(item_id)
        if new_qty > item.qty:
            raise ValueError(f"Only {item.qty} available")

        return self.state.cart.update_quantity(item_id, new_qty)

    def remove_from_cart(self, item_id: str) -> bool:
        return self.state.cart.remove_from_cart(item_id)

    def apply_discount(self, value: Any) -> Decimal:
        """Apply a percentage discount between 0 and 100."""
        discount = parse_amount(value, default=None)
        if discount is None or discount < 0 or discount > 100:
            raise ValueError("Please enter a valid discount (0-100%)")

        self.state.cart.set_discount(discount)
        return discount

    def set_customer(self, customer: str | None) -> None:
        self.state.cart.set_customer(customer.strip() if customer else None)

    def checkout(
        self,
        payment_method: PaymentMethod | str = PaymentMethod.CASH,
        amount_received: Any = None,
    ) -> Transaction:
        """Validate and complete the sale."""
        command = CheckoutCommand(self.state)
        plan = command.plan(payment_method, amount_received)
        with self.tracer.trace_operation(
            "checkout_applied", self.action_id, cart_lines=len(plan.lines)
        ) as extra:
            transaction = command.apply(plan)
            extra["transaction_id"] = transaction.id

        self.logger.log_action(
            action="checkout_completed",
            transaction_id=transaction.id,
            total=str(transaction.total),
            payment_method=transaction.payment_method.value,
        )
        return transaction
