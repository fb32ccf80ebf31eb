"""Read-only view of the session, consumed by UI collaborators."""

from abc import ABC, abstractmethod

from fruit_shop.domain.entities import SessionUser


class SessionView(ABC):
    """Exposes who is logged in, without any way to change it."""

    @abstractmethod
    def is_authenticated(self) -> bool:
        ...

    @abstractmethod
    def current_user(self) -> SessionUser | None:
        ...
