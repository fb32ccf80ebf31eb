"""Abstract repository interface (port) for the order ledger collection."""

from abc import ABC, abstractmethod

from fruit_shop.domain.entities import OrderRecord


class OrderRepository(ABC):
    """Port for order persistence. The collection is read and written as a whole."""

    @abstractmethod
    def load_all(self) -> list[OrderRecord]:
        """Return every stored order, in insertion order."""
        ...

    @abstractmethod
    def save_all(self, orders: list[OrderRecord]) -> None:
        """Replace the stored collection with ``orders``."""
        ...
