"""Application service for placing orders and moving them through their statuses."""

import json
import logging
from collections.abc import Iterable
from datetime import timedelta
from typing import Any

from fruit_shop.application.interfaces import BasketClearer, OrderRepository
from fruit_shop.application.services.account_directory import AccountDirectory
from fruit_shop.application.services.identifiers import Clock, StampIdGenerator, utc_now
from fruit_shop.domain.entities import OrderRecord, OrderStatus, PriceList, Status
from fruit_shop.domain.exceptions import NotFoundError, UnauthenticatedError, ValidationError

logger = logging.getLogger(__name__)

ORDER_ID_PREFIX = "ORD-"
DEFAULT_DELIVERY_WINDOW = timedelta(hours=2)


def _is_json_compatible(payload: Any) -> bool:
    """True when ``payload`` comes back unchanged from a JSON round trip."""
    try:
        return json.loads(json.dumps(payload)) == payload
    except (TypeError, ValueError):
        return False


class OrderLedger:
    """Owns the order collection. Identity comes from the AccountDirectory.

    Status changes are permissive: any status may follow any other.
    """

    def __init__(
        self,
        orders: OrderRepository,
        directory: AccountDirectory,
        basket: BasketClearer,
        prices: PriceList,
        delivery_window: timedelta = DEFAULT_DELIVERY_WINDOW,
        clock: Clock = utc_now,
        ids: StampIdGenerator | None = None,
    ) -> None:
        self._orders = orders
        self._directory = directory
        self._basket = basket
        self._prices = prices
        self._delivery_window = delivery_window
        self._clock = clock
        self._ids = ids or StampIdGenerator(clock)

    def create_order(self, items: Iterable[str], delivery_details: Any) -> OrderRecord:
        session = self._directory.current_user()
        if session is None:
            raise UnauthenticatedError("place an order")

        items = list(items)
        if not items:
            raise ValidationError(["items"], "Your basket is empty")
        if not _is_json_compatible(delivery_details):
            raise ValidationError(
                ["delivery_details"], "Delivery details must be plain JSON data"
            )

        # Fail before anything is written if the owner has vanished
        self._directory.get_user(session.id)

        now = self._clock()
        order = OrderRecord(
            id=self._ids.next_id(ORDER_ID_PREFIX),
            user_id=session.id,
            items=items,
            delivery_details=delivery_details,
            total=self._prices.total(items),
            order_date=now,
            estimated_delivery=now + self._delivery_window,
            status=OrderStatus.PENDING,
        )

        orders = self._orders.load_all()
        orders.append(order)
        self._orders.save_all(orders)

        self._directory.attach_order(session.id, order.id)
        self._basket.clear()

        logger.info(
            "Order %s placed by user %s (%d items, total %s)",
            order.id, session.id, len(items), order.total,
        )
        return order

    def all_orders(self) -> list[OrderRecord]:
        return self._orders.load_all()

    def orders_for_current_user(self) -> list[OrderRecord]:
        """Return the session user's orders, most recent first."""
        session = self._directory.current_user()
        if session is None:
            return []
        mine = [o for o in self._orders.load_all() if o.user_id == session.id]
        return sorted(mine, key=lambda o: o.order_date, reverse=True)

    list_orders = orders_for_current_user

    def find_order(self, order_id: str) -> OrderRecord | None:
        for order in self._orders.load_all():
            if order.id == order_id:
                return order
        return None

    def get_order(self, order_id: str) -> OrderRecord:
        order = self.find_order(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    def advance_status(
        self, order_id: str, new_status: "str | Status", message: str = ""
    ) -> OrderRecord:
        orders = self._orders.load_all()
        order = next((o for o in orders if o.id == order_id), None)
        if order is None:
            raise NotFoundError("Order", order_id)

        change = order.advance(new_status, message, at=self._clock())
        self._orders.save_all(orders)

        logger.info("Order %s is now %s", order.id, change.status.value)
        return order
