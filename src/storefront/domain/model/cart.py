"""Cart aggregate: line items keyed by product, bounded by stock.

Every mutation validates first and only then touches the lines, so a
rejected operation leaves the cart exactly as it was.  Rejections are
returned as a ``CartResult`` rather than raised: the UI needs them for
feedback and they are not errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


class CartOutcome(Enum):
    ADDED = "ADDED"
    INCREMENTED = "INCREMENTED"
    QUANTITY_UPDATED = "QUANTITY_UPDATED"
    REMOVED = "REMOVED"
    CLEARED = "CLEARED"
    NOT_IN_CART = "NOT_IN_CART"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    STOCK_EXCEEDED = "STOCK_EXCEEDED"
    INVALID_QUANTITY = "INVALID_QUANTITY"

    @property
    def is_rejection(self) -> bool:
        return self in _REJECTIONS

    @property
    def mutates(self) -> bool:
        """True for outcomes that changed the cart and must be persisted."""
        return self in _MUTATIONS


_REJECTIONS = frozenset(
    {CartOutcome.OUT_OF_STOCK, CartOutcome.STOCK_EXCEEDED, CartOutcome.INVALID_QUANTITY}
)
_MUTATIONS = frozenset(
    {
        CartOutcome.ADDED,
        CartOutcome.INCREMENTED,
        CartOutcome.QUANTITY_UPDATED,
        CartOutcome.REMOVED,
        CartOutcome.CLEARED,
    }
)


@dataclass(frozen=True)
class PersistenceWarning:
    """The durable mirror could not be read or written.

    Non-fatal: the in-memory cart stays authoritative for the session.
    """

    operation: str
    detail: str

    def __str__(self) -> str:
        return f"Cart {self.operation} failed: {self.detail}"


@dataclass(frozen=True)
class CartResult:
    outcome: CartOutcome
    product_id: str | None
    quantity: int
    message: str
    warning: PersistenceWarning | None = None

    @property
    def ok(self) -> bool:
        return not self.outcome.is_rejection


@dataclass(frozen=True)
class CartTotals:
    item_count: int
    amount: Money


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class CartLine:
    """One product entry in the cart.

    Invariants:
    - ``quantity`` is an integer >= 1
    - ``stock_limit`` is an integer >= 0
    - ``quantity <= stock_limit``
    """

    product_id: str
    name: str
    brand: str
    unit_price: Money
    image_url: str
    quantity: int
    stock_limit: int

    def __post_init__(self) -> None:
        if not isinstance(self.product_id, str) or not self.product_id:
            raise ValidationError("Cart line product id must be a non-empty string")
        if not _is_int(self.quantity) or self.quantity < 1:
            raise ValidationError(
                f"Cart line quantity must be a positive integer, got {self.quantity!r}"
            )
        if not _is_int(self.stock_limit) or self.stock_limit < 0:
            raise ValidationError(
                f"Cart line stock limit must be a non-negative integer, got {self.stock_limit!r}"
            )
        if self.quantity > self.stock_limit:
            raise ValidationError(
                f"Quantity {self.quantity} of {self.name} exceeds stock limit {self.stock_limit}"
            )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    ``lines`` keeps insertion order; that order is what gets persisted and
    restored.
    """

    lines: list[CartLine] = field(default_factory=list)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for line in self.lines:
            if line.product_id in seen:
                raise ValidationError(f"Duplicate cart line for product '{line.product_id}'")
            seen.add(line.product_id)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, requested_stock_limit: int) -> CartResult:
        """Add one unit of *product*.

        ``requested_stock_limit`` is the live stock figure; a successful add
        records it as the line's new stock snapshot.
        """
        if not _is_int(requested_stock_limit) or requested_stock_limit <= 0:
            return self._reject(
                CartOutcome.OUT_OF_STOCK, product.id, "Product is out of stock"
            )

        line = self.find(product.id)
        if line is None:
            self.lines.append(
                CartLine(
                    product_id=product.id,
                    name=product.name,
                    brand=product.brand,
                    unit_price=product.price,
                    image_url=product.image_url,
                    quantity=1,
                    stock_limit=requested_stock_limit,
                )
            )
            return CartResult(CartOutcome.ADDED, product.id, 1, "Product added to cart")

        if line.quantity + 1 > requested_stock_limit:
            return self._reject(
                CartOutcome.STOCK_EXCEEDED,
                product.id,
                f"Maximum quantity in stock reached ({requested_stock_limit})",
            )

        line.stock_limit = requested_stock_limit
        line.quantity += 1
        return CartResult(
            CartOutcome.INCREMENTED, product.id, line.quantity, "Cart quantity updated"
        )

    def remove(self, product_id: str) -> CartResult:
        line = self.find(product_id)
        if line is None:
            return CartResult(CartOutcome.NOT_IN_CART, product_id, 0, "Product is not in the cart")
        self.lines.remove(line)
        return CartResult(CartOutcome.REMOVED, product_id, 0, "Product removed from cart")

    def set_quantity(self, product_id: str, quantity: int) -> CartResult:
        if not _is_int(quantity) or quantity < 1:
            return self._reject(
                CartOutcome.INVALID_QUANTITY, product_id, "Quantity must be at least 1"
            )

        line = self.find(product_id)
        if line is None:
            return CartResult(CartOutcome.NOT_IN_CART, product_id, 0, "Product is not in the cart")

        if quantity > line.stock_limit:
            return self._reject(
                CartOutcome.STOCK_EXCEEDED,
                product_id,
                f"Quantity exceeds available stock ({line.stock_limit})",
            )

        line.quantity = quantity
        return CartResult(CartOutcome.QUANTITY_UPDATED, product_id, quantity, "Cart quantity updated")

    def clear(self) -> CartResult:
        self.lines.clear()
        return CartResult(CartOutcome.CLEARED, None, 0, "Cart cleared")

    # --- Queries --------------------------------------------------------------

    def find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def totals(self) -> CartTotals:
        amount = Money.zero()
        for line in self.lines:
            amount = amount + line.line_total
        return CartTotals(
            item_count=sum(line.quantity for line in self.lines),
            amount=amount,
        )

    @property
    def is_empty(self) -> bool:
        return not self.lines

    # --- Internal helpers -----------------------------------------------------

    def _reject(self, outcome: CartOutcome, product_id: str, message: str) -> CartResult:
        line = self.find(product_id)
        return CartResult(outcome, product_id, line.quantity if line else 0, message)
