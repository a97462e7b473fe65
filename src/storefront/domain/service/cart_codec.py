"""Text encoding of the cart for the durable mirror.

The mirror holds a JSON array of line objects in cart order::

    [{"productId": "p1", "name": "...", "brand": "...", "unitPrice": 10.5,
      "imageUrl": "...", "quantity": 2, "stockLimit": 5}]

Decoding is all-or-nothing: any malformed field or invariant violation
rejects the whole payload with ``ValidationError``.  A partially repaired
cart could admit a line whose stock has since changed.
"""

from __future__ import annotations

import json
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Money

_STRING_FIELDS = ("productId", "name", "brand", "imageUrl")
_INT_FIELDS = ("quantity", "stockLimit")


def encode_cart(lines: list[CartLine] | tuple[CartLine, ...]) -> str:
    return "[" + ", ".join(_to_raw(line) for line in lines) + "]"


def decode_cart(payload: str) -> list[CartLine]:
    """Parse a persisted cart.

    Raises ValidationError if the payload is not exactly the expected shape
    or any line breaks a cart invariant.
    """
    try:
        raw = json.loads(payload, parse_float=Decimal)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ValidationError(f"Persisted cart is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise ValidationError("Persisted cart must be a JSON array")

    lines = [_to_domain(item) for item in raw]
    # Duplicate product ids are rejected by the aggregate.
    Cart(lines=lines)
    return lines


# --- Serialization helpers ----------------------------------------------------


def _to_domain(item: object) -> CartLine:
    if not isinstance(item, dict):
        raise ValidationError("Persisted cart line must be an object")

    for key in _STRING_FIELDS:
        if not isinstance(item.get(key), str):
            raise ValidationError(f"Persisted cart line field '{key}' must be a string")
    for key in _INT_FIELDS:
        value = item.get(key)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(f"Persisted cart line field '{key}' must be an integer")

    price = item.get("unitPrice")
    if isinstance(price, bool) or not isinstance(price, (int, Decimal)):
        raise ValidationError("Persisted cart line field 'unitPrice' must be a number")

    return CartLine(
        product_id=item["productId"],
        name=item["name"],
        brand=item["brand"],
        unit_price=Money(Decimal(price)),
        image_url=item["imageUrl"],
        quantity=item["quantity"],
        stock_limit=item["stockLimit"],
    )


def _to_raw(line: CartLine) -> str:
    fields = (
        ("productId", json.dumps(line.product_id, ensure_ascii=False)),
        ("name", json.dumps(line.name, ensure_ascii=False)),
        ("brand", json.dumps(line.brand, ensure_ascii=False)),
        ("unitPrice", _to_json_number(line.unit_price.amount)),
        ("imageUrl", json.dumps(line.image_url, ensure_ascii=False)),
        ("quantity", str(line.quantity)),
        ("stockLimit", str(line.stock_limit)),
    )
    return "{" + ", ".join(f'"{key}": {value}' for key, value in fields) + "}"


def _to_json_number(amount: Decimal) -> str:
    # json cannot serialize Decimal; write its exact digits in plain notation.
    if amount == amount.to_integral_value():
        return str(int(amount))
    return format(amount, "f")
