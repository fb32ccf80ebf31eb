"""Abstract key-value store interface (port), standing in for browser local storage."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Port for string-keyed blob storage — implemented in the infrastructure layer."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is not an error."""
        ...
