"""Abstract credential hashing interface (port)."""

from abc import ABC, abstractmethod


class CredentialHasher(ABC):
    """Derives and checks stored credentials from plain-text passwords."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Derive the value stored as a user's credential."""
        ...

    @abstractmethod
    def verify(self, password: str, stored_hash: str) -> bool:
        """Return True if ``password`` matches ``stored_hash``."""
        ...
