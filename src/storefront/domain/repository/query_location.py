"""Abstract navigable location holding the product-list query string."""

from __future__ import annotations

from abc import ABC, abstractmethod


class QueryLocation(ABC):

    @abstractmethod
    def read(self) -> dict[str, str]:
        """Return the current query parameters (first value per key)."""

    @abstractmethod
    def replace(self, params: dict[str, str]) -> None:
        """Swap the whole query string for *params* in one step.

        Replaces the current history entry; never pushes a new one.
        """
