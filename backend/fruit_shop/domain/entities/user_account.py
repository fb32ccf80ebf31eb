"""Domain entities for shop customers and the logged-in session."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class SessionUser:
    """A user as seen by the session: every field except the credential."""

    id: str
    email: str
    first_name: str
    last_name: str
    phone: str = ""
    address: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    order_ids: list[str] = field(default_factory=list)


@dataclass
class UserRecord:
    """Core domain entity for a registered customer.

    ``email`` is unique within the directory. ``order_ids`` only ever
    grows; orders are never detached from their owner.
    """

    id: str
    email: str
    credential_hash: str
    first_name: str
    last_name: str
    phone: str = ""
    address: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    order_ids: list[str] = field(default_factory=list)

    def update(
        self,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> None:
        """Overwrite the given profile fields; ``None`` leaves a field as is."""
        if email is not None:
            self.email = email
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if phone is not None:
            self.phone = phone
        if address is not None:
            self.address = address

    def append_order(self, order_id: str) -> None:
        self.order_ids.append(order_id)

    def to_session(self) -> SessionUser:
        """Strip the credential for use as the session snapshot."""
        return SessionUser(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
            address=self.address,
            created_at=self.created_at,
            order_ids=list(self.order_ids),
        )
