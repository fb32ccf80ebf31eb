"""Domain entities for orders and their status lifecycle."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Union

GENERIC_STATUS_MESSAGE = "Status updated"
ORDER_PLACED_MESSAGE = "Order placed successfully"


class OrderStatus(str, Enum):
    """Known lifecycle states of an order."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def default_message(self) -> str:
        return _DEFAULT_MESSAGES[self]


_DEFAULT_MESSAGES = {
    OrderStatus.PENDING: "Order is being processed",
    OrderStatus.CONFIRMED: "Order confirmed and being prepared",
    OrderStatus.PREPARING: "Your fresh fruits are being prepared",
    OrderStatus.OUT_FOR_DELIVERY: "Order is out for delivery",
    OrderStatus.DELIVERED: "Order has been delivered",
    OrderStatus.CANCELLED: "Order has been cancelled",
}


@dataclass(frozen=True)
class CustomStatus:
    """A status string outside the known set, kept verbatim.

    Any status may follow any other, so unknown values are accepted rather
    than rejected.
    """

    value: str

    @property
    def default_message(self) -> str:
        return GENERIC_STATUS_MESSAGE


Status = Union[OrderStatus, CustomStatus]


def parse_status(raw: "str | Status") -> Status:
    """Map a raw status string to a known OrderStatus or a CustomStatus."""
    if isinstance(raw, (OrderStatus, CustomStatus)):
        return raw
    try:
        return OrderStatus(raw)
    except ValueError:
        return CustomStatus(raw)


@dataclass
class StatusChange:
    """One entry in an order's status history."""

    status: Status
    timestamp: datetime
    message: str


@dataclass
class OrderRecord:
    """Core domain entity: a placed order and its status history.

    ``order_date``, ``estimated_delivery`` and ``total`` are fixed at
    creation. The history is append-only and its last entry always carries
    the current ``status``.
    """

    id: str
    user_id: str
    items: list[str]
    delivery_details: Any
    total: Decimal
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    estimated_delivery: datetime | None = None
    status: Status = OrderStatus.PENDING
    status_history: list[StatusChange] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.status_history:
            self.status_history.append(
                StatusChange(
                    status=self.status,
                    timestamp=self.order_date,
                    message=ORDER_PLACED_MESSAGE,
                )
            )

    @property
    def latest_change(self) -> StatusChange:
        return self.status_history[-1]

    def advance(self, status: "str | Status", message: str = "", at: datetime | None = None) -> StatusChange:
        """Move to ``status`` and record it; no transition rules apply."""
        new_status = parse_status(status)
        change = StatusChange(
            status=new_status,
            timestamp=at or datetime.now(timezone.utc),
            message=message or new_status.default_message,
        )
        self.status = new_status
        self.status_history.append(change)
        return change
