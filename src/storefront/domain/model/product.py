"""Product record as supplied by the remote catalog.

The catalog is owned by the remote store; the storefront only reads
products to list them and to learn the live stock figure when something
is added to the cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``stock`` is the live figure at the time the record was fetched.
    """

    id: str
    name: str
    brand: str
    price: Money
    stock: int
    category_id: str | None = None
    image_url: str = ""
    created_at: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if not isinstance(self.stock, int) or isinstance(self.stock, bool):
            raise ValidationError(
                f"Product stock must be an integer, got {type(self.stock).__name__}"
            )
        if self.stock < 0:
            raise ValidationError(f"Product stock cannot be negative, got {self.stock}")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0
