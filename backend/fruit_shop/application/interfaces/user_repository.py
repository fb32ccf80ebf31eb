"""Abstract repository interfaces (ports) for user records and the session snapshot."""

from abc import ABC, abstractmethod

from fruit_shop.domain.entities import SessionUser, UserRecord


class UserRepository(ABC):
    """Port for the user directory collection.

    The collection is read and written as a whole.
    """

    @abstractmethod
    def load_all(self) -> list[UserRecord]:
        """Return every stored user, in insertion order."""
        ...

    @abstractmethod
    def save_all(self, users: list[UserRecord]) -> None:
        """Replace the stored collection with ``users``."""
        ...


class SessionRepository(ABC):
    """Port for the persisted session snapshot."""

    @abstractmethod
    def load(self) -> SessionUser | None:
        ...

    @abstractmethod
    def save(self, user: SessionUser) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...
