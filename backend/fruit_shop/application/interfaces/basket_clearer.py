"""Abstract interface for emptying the shopper's basket after checkout."""

from abc import ABC, abstractmethod


class BasketClearer(ABC):
    """Port for the basket collaborator, whose storage lives elsewhere."""

    @abstractmethod
    def clear(self) -> None:
        ...
