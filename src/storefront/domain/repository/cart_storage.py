"""Abstract durable mirror for the cart.

Defined in the domain layer so the domain never depends on
infrastructure. The mirror stores one opaque text value under a fixed
key; encoding is the cart codec's job, not the storage's.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

CART_STORAGE_KEY = "cart"


class CartStorage(ABC):

    @abstractmethod
    def load(self) -> str | None:
        """Return the stored cart text, or None if nothing is stored.

        Raises PersistenceError if the store cannot be read.
        """

    @abstractmethod
    def save(self, payload: str) -> None:
        """Replace the stored cart text.

        Raises PersistenceError if the store cannot be written.
        """

    @abstractmethod
    def delete(self) -> None:
        """Remove the stored cart entirely."""
